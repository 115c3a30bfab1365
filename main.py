import os
import sys
from PyQt6.QtWidgets import QApplication
import qdarktheme

from pyaudioplayer.core.media_engine import MediaEngine
from pyaudioplayer.core.session import PlayerSession
from pyaudioplayer.ui.main_window import MainWindow

def main():
    app = QApplication(sys.argv)
    
    # Apply modern dark theme
    app.setStyleSheet(qdarktheme.load_stylesheet(theme="dark"))
    
    session = PlayerSession(MediaEngine())
    clips = app.arguments()[1:]
    if clips:
        # Single clip given on the command line (URL or file path)
        session.open_clip(clips[0], tag=os.path.basename(clips[0]))
    else:
        session.open_demo_playlist()
    
    window = MainWindow(session)
    window.show()
    
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
