"""
Sound Manager
=============
Audio sink untuk simulation: play_cue() saja.
Channel, volume dan background loop diurus di sini.
"""

import itertools
import pygame
from typing import Dict, Optional
from enum import Enum

from ..config import (
    AudioCue, ControllerKind, CONTROLLER_PROFILES,
    AUDIO_ENABLED, AUDIO_SAMPLE_RATE, AUDIO_CHANNELS,
    AUDIO_BUFFER_SIZE, MASTER_VOLUME, SFX_VOLUME, MUSIC_VOLUME
)
from .generator import ProceduralSFX


class SoundChannel(Enum):
    """Volume groups"""
    MASTER = "master"
    SFX = "sfx"
    MUSIC = "music"


SFX_CHANNELS = 6     # mixer channels 0..5 rotate for effects
MUSIC_CHANNEL = 6    # background loop


class SoundManager:
    """
    Procedural SFX di atas pygame.mixer.
    If the mixer cannot start, initialized stays False and every call is a no-op.
    """

    def __init__(self):
        self.enabled = AUDIO_ENABLED
        self.initialized = False

        self.volumes: Dict[SoundChannel, float] = {
            SoundChannel.MASTER: MASTER_VOLUME,
            SoundChannel.SFX: SFX_VOLUME,
            SoundChannel.MUSIC: MUSIC_VOLUME,
        }
        self.muted: Dict[SoundChannel, bool] = {c: False for c in SoundChannel}

        self._sfx: Optional[ProceduralSFX] = None
        self._sfx_channels = None
        self._music_channel: Optional[pygame.mixer.Channel] = None
        self._music_paused = False

        if self.enabled:
            self._init_audio()

    def _init_audio(self):
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=AUDIO_SAMPLE_RATE, size=-16,
                                  channels=AUDIO_CHANNELS, buffer=AUDIO_BUFFER_SIZE)
            pygame.mixer.set_num_channels(MUSIC_CHANNEL + 1)

            self._sfx_channels = itertools.cycle(
                [pygame.mixer.Channel(i) for i in range(SFX_CHANNELS)]
            )
            self._music_channel = pygame.mixer.Channel(MUSIC_CHANNEL)
            self._sfx = ProceduralSFX()
        except pygame.error as e:
            print(f"[Audio] Failed to initialize: {e}")
            self.enabled = False
            return

        self.initialized = True
        print("[Audio] Sound manager initialized")

    # =========================================================================
    # CUES
    # =========================================================================

    def play_cue(self, cue: AudioCue, controller: Optional[ControllerKind] = None):
        if cue == AudioCue.ATTACK_SWING:
            profile = CONTROLLER_PROFILES[controller or ControllerKind.HUMAN]
            self.play(profile.swing_sound, SoundChannel.SFX)
        elif cue == AudioCue.KNOCKOUT:
            self.play('ko', SoundChannel.SFX)
        elif cue == AudioCue.BACKGROUND_START:
            self.start_music()
        elif cue == AudioCue.BACKGROUND_STOP:
            self.pause_music()
        elif cue == AudioCue.BACKGROUND_RESTART:
            self.restart_music()

    # Background loop: start/resume, pause, rewind
    def start_music(self):
        if not self.initialized:
            return
        if self._music_paused:
            self._music_channel.unpause()
            self._music_paused = False
        elif not self._music_channel.get_busy():
            self.play('bg_music', SoundChannel.MUSIC, loops=-1)

    def pause_music(self):
        if not self.initialized:
            return
        self._music_channel.pause()
        self._music_paused = True

    def restart_music(self):
        """Stop now; the next start_music() plays from the top"""
        if not self.initialized:
            return
        self._music_channel.stop()
        self._music_paused = False

    # =========================================================================
    # PLAYBACK
    # =========================================================================

    def play(self, sound_name: str,
             channel_type: SoundChannel = SoundChannel.SFX,
             volume: float = 1.0, loops: int = 0) -> Optional[pygame.mixer.Channel]:
        """Play by name. Returns the channel, or None when nothing played."""
        if not self.initialized or self.is_muted(channel_type):
            return None

        sound = self._sfx.get(sound_name)
        if sound is None:
            return None

        channel = (self._music_channel if channel_type == SoundChannel.MUSIC
                   else next(self._sfx_channels))
        sound.set_volume(self.effective_volume(channel_type, volume))
        channel.play(sound, loops=loops)
        return channel

    def effective_volume(self, channel_type: SoundChannel, volume: float = 1.0) -> float:
        return self.volumes[SoundChannel.MASTER] * self.volumes[channel_type] * volume

    def is_muted(self, channel_type: SoundChannel) -> bool:
        return self.muted[SoundChannel.MASTER] or self.muted[channel_type]

    def cleanup(self):
        if not self.initialized:
            return
        pygame.mixer.stop()
        pygame.mixer.quit()
        self.initialized = False
        print("[Audio] Sound manager cleaned up")
