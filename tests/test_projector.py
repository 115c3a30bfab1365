"""
Tests for PlaybackStateProjector.
"""
import itertools

import pytest

from pyaudioplayer.core.config import ButtonState, ProcessingStage, RepeatMode
from pyaudioplayer.core.projector import PlaybackStateProjector
from pyaudioplayer.core.snapshot import PlaybackSnapshot
from pyaudioplayer.core.types import AudioSource, PlayerState, SequenceState


class TestButtonStateFold:
    """Tests for the engine-state fold."""

    def test_initial_snapshot_is_default(self, projector):
        assert projector.snapshot == PlaybackSnapshot()

    @pytest.mark.parametrize("stage", [ProcessingStage.LOADING, ProcessingStage.BUFFERING])
    @pytest.mark.parametrize("playing", [True, False])
    def test_loading_wins_regardless_of_playing(self, engine, projector, stage, playing):
        engine.playerStateChanged.emit(PlayerState(playing, stage))
        assert projector.snapshot.button_state == ButtonState.LOADING

    @pytest.mark.parametrize("stage", [ProcessingStage.IDLE, ProcessingStage.READY, ProcessingStage.COMPLETED])
    def test_not_playing_is_paused(self, engine, projector, stage):
        engine.playerStateChanged.emit(PlayerState(False, stage))
        assert projector.snapshot.button_state == ButtonState.PAUSED
        assert engine.count("seek") == 0

    def test_playing_and_ready_is_playing(self, engine, projector):
        engine.playerStateChanged.emit(PlayerState(True, ProcessingStage.READY))
        assert projector.snapshot.button_state == ButtonState.PLAYING

    def test_completed_rewinds_and_pauses_once(self, engine, projector):
        engine.playerStateChanged.emit(PlayerState(True, ProcessingStage.COMPLETED))

        assert engine.calls == [("seek", 0.0), ("pause",)]
        assert projector.snapshot.button_state == ButtonState.PAUSED

    def test_idle_ready_completed_scenario(self, engine, projector):
        engine.playerStateChanged.emit(PlayerState(False, ProcessingStage.IDLE))
        assert projector.snapshot.button_state == ButtonState.PAUSED

        engine.playerStateChanged.emit(PlayerState(True, ProcessingStage.READY))
        assert projector.snapshot.button_state == ButtonState.PLAYING

        engine.playerStateChanged.emit(PlayerState(True, ProcessingStage.COMPLETED))
        assert engine.count("seek") == 1
        assert engine.count("pause") == 1
        assert projector.snapshot.button_state == ButtonState.PAUSED


class TestDurationFolds:
    """Tests for position, buffered position and duration folds."""

    def test_each_signal_touches_only_its_field(self, engine, projector):
        engine.playerStateChanged.emit(PlayerState(True, ProcessingStage.READY))
        engine.positionChanged.emit(12.5)
        engine.bufferedPositionChanged.emit(30.0)
        engine.durationChanged.emit(180.0)

        snapshot = projector.snapshot
        assert snapshot.current_position == 12.5
        assert snapshot.buffered_position == 30.0
        assert snapshot.total_duration == 180.0
        assert snapshot.button_state == ButtonState.PLAYING

    def test_unresolved_duration_is_zero(self, engine, projector):
        engine.durationChanged.emit(200.0)
        engine.durationChanged.emit(None)
        assert projector.snapshot.total_duration == 0.0

    def test_latest_value_wins_in_any_interleaving(self, engine, projector):
        emissions = [
            ("positionChanged", 1.0),
            ("bufferedPositionChanged", 5.0),
            ("durationChanged", 100.0),
            ("positionChanged", 2.0),
            ("bufferedPositionChanged", 8.0),
            ("durationChanged", 120.0),
        ]
        for order in itertools.permutations(emissions):
            latest = {}
            for name, value in order:
                getattr(engine, name).emit(value)
                latest[name] = value

            snapshot = projector.snapshot
            assert snapshot.current_position == latest["positionChanged"]
            assert snapshot.buffered_position == latest["bufferedPositionChanged"]
            assert snapshot.total_duration == latest["durationChanged"]

    def test_every_update_publishes_a_new_snapshot(self, engine, projector, emitted):
        before = projector.snapshot
        engine.positionChanged.emit(3.0)

        assert len(emitted) == 1
        assert emitted[0] is projector.snapshot
        assert emitted[0] is not before
        assert before.current_position == 0.0


class TestSequenceFold:
    """Tests for the sequence-state fold."""

    def test_labels_and_current_track(self, engine, projector, three_sources):
        engine.sequenceStateChanged.emit(SequenceState(tuple(three_sources), current_index=1))

        snapshot = projector.snapshot
        assert snapshot.current_track_label == "Song 2"
        assert snapshot.playlist == ("Song 1", "Song 2", "Song 3")
        assert not snapshot.is_first_track
        assert not snapshot.is_last_track

    def test_edges(self, engine, projector, three_sources):
        engine.sequenceStateChanged.emit(SequenceState(tuple(three_sources), current_index=0))
        assert projector.snapshot.is_first_track
        assert not projector.snapshot.is_last_track

        engine.sequenceStateChanged.emit(SequenceState(tuple(three_sources), current_index=2))
        assert not projector.snapshot.is_first_track
        assert projector.snapshot.is_last_track

    def test_single_item_is_first_and_last(self, engine, projector):
        only = AudioSource("clip.mp3", "Clip")
        engine.sequenceStateChanged.emit(SequenceState((only,), current_index=0))
        assert projector.snapshot.is_first_track
        assert projector.snapshot.is_last_track

    def test_empty_sequence_does_not_fail(self, engine, projector):
        engine.sequenceStateChanged.emit(SequenceState((), current_index=None))

        snapshot = projector.snapshot
        assert snapshot.playlist == ()
        assert snapshot.current_track_label == ""
        assert snapshot.is_first_track
        assert snapshot.is_last_track

    def test_no_current_item_in_populated_sequence(self, engine, projector, three_sources):
        engine.sequenceStateChanged.emit(SequenceState(tuple(three_sources), current_index=None))

        snapshot = projector.snapshot
        assert snapshot.current_track_label == ""
        assert not snapshot.is_first_track
        assert not snapshot.is_last_track

    def test_none_is_ignored(self, engine, projector, emitted):
        engine.sequenceStateChanged.emit(None)
        assert emitted == []

    def test_uses_effective_order(self, engine, projector, three_sources):
        # Shuffled order: Song 3, Song 1, Song 2; current is Song 2
        state = SequenceState(
            tuple(three_sources),
            current_index=1,
            shuffle_enabled=True,
            shuffle_indices=(2, 0, 1),
        )
        engine.sequenceStateChanged.emit(state)

        snapshot = projector.snapshot
        assert snapshot.playlist == ("Song 3", "Song 1", "Song 2")
        assert snapshot.shuffle_enabled
        assert not snapshot.is_first_track
        assert snapshot.is_last_track

    def test_identity_not_equality(self, engine, projector):
        # Same URI and label twice: only the current instance counts
        first = AudioSource("loop.mp3", "Loop")
        second = AudioSource("loop.mp3", "Loop")
        engine.sequenceStateChanged.emit(SequenceState((first, second), current_index=1))
        assert not projector.snapshot.is_first_track
        assert projector.snapshot.is_last_track

    def test_current_row_follows_effective_order(self, engine, projector, three_sources):
        engine.sequenceStateChanged.emit(SequenceState(tuple(three_sources), current_index=1))
        assert projector.snapshot.current_track_index == 1

        shuffled = SequenceState(
            tuple(three_sources),
            current_index=1,
            shuffle_enabled=True,
            shuffle_indices=(1, 2, 0),
        )
        engine.sequenceStateChanged.emit(shuffled)
        assert projector.snapshot.current_track_index == 0

    def test_current_row_with_duplicate_tags(self, engine, projector):
        first = AudioSource("a.mp3")
        second = AudioSource("b.mp3")
        engine.sequenceStateChanged.emit(SequenceState((first, second), current_index=1))
        assert projector.snapshot.playlist == ("", "")
        assert projector.snapshot.current_track_index == 1

    def test_no_current_row(self, engine, projector, three_sources):
        engine.sequenceStateChanged.emit(SequenceState(tuple(three_sources), current_index=0))
        engine.sequenceStateChanged.emit(SequenceState((), current_index=None))
        assert projector.snapshot.current_track_index is None

    def test_keeps_unrelated_fields(self, engine, projector, three_sources):
        engine.positionChanged.emit(42.0)
        projector.predict(repeat_mode=RepeatMode.REPEAT_ALL)
        engine.sequenceStateChanged.emit(SequenceState(tuple(three_sources), current_index=0))

        assert projector.snapshot.current_position == 42.0
        assert projector.snapshot.repeat_mode == RepeatMode.REPEAT_ALL


class TestPrediction:
    """Tests for locally predicted fields."""

    def test_predict_replaces_snapshot(self, projector, emitted):
        projector.predict(shuffle_enabled=True)
        assert projector.snapshot.shuffle_enabled
        assert len(emitted) == 1

    def test_engine_signal_overrides_prediction(self, engine, projector, three_sources):
        projector.predict(shuffle_enabled=True)
        engine.sequenceStateChanged.emit(SequenceState(tuple(three_sources), current_index=0))
        assert not projector.snapshot.shuffle_enabled


class TestDispose:
    """Tests for projector teardown."""

    def test_dispose_releases_engine(self, engine, projector):
        projector.dispose()
        assert engine.disposed
        assert projector.is_disposed

    def test_dispose_is_idempotent(self, engine, projector):
        projector.dispose()
        projector.dispose()
        assert engine.count("dispose") == 1

    def test_no_updates_after_dispose(self, engine, projector, emitted):
        projector.dispose()
        engine.positionChanged.emit(10.0)
        engine.playerStateChanged.emit(PlayerState(True, ProcessingStage.COMPLETED))

        assert emitted == []
        assert projector.snapshot.current_position == 0.0
        assert engine.count("seek") == 0

    def test_independent_projectors(self, engine):
        first = PlaybackStateProjector(engine)
        second = PlaybackStateProjector(engine)
        first.dispose()
        engine.positionChanged.emit(7.0)

        assert first.snapshot.current_position == 0.0
        assert second.snapshot.current_position == 7.0
