"""Audio cues for session events. Playback problems never reach game state."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional

from PySide6.QtCore import QObject, QUrl
from PySide6.QtMultimedia import QSoundEffect

from spotdiff.core.puzzle import Coordinate
from spotdiff.core.session import SessionEvent

logger = logging.getLogger(__name__)

SOUNDS_DIR = Path(__file__).resolve().parent.parent / "assets" / "sounds"

_CUES = {
    SessionEvent.CORRECT_FIND: "correct.wav",
    SessionEvent.MISTAKE: "mistake.wav",
    SessionEvent.WON: "won.wav",
}


class SoundPlayer(QObject):
    """Session listener that plays a short cue per event when enabled."""

    def __init__(self, enabled: bool = True, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self.enabled = enabled
        self._effects: Dict[SessionEvent, QSoundEffect] = {}
        for event, filename in _CUES.items():
            path = SOUNDS_DIR / filename
            if not path.exists():
                logger.warning("Sound file not found: %s", path)
                continue
            effect = QSoundEffect(self)
            effect.setSource(QUrl.fromLocalFile(str(path)))
            effect.setVolume(0.6)
            self._effects[event] = effect

    def __call__(self, event: SessionEvent, coord: Optional[Coordinate]) -> None:
        if not self.enabled:
            return
        effect = self._effects.get(event)
        if effect is None:
            return
        if effect.status() == QSoundEffect.Status.Error:
            logger.warning("Could not play %s cue", event.value)
            return
        effect.play()
