"""
Sound Generator
===============
Procedural sound untuk Slayer Duel: swing, KO sting, background loop.
Semua di-synthesize dengan numpy saat startup, tanpa file audio.
"""

import pygame
import numpy as np
from typing import Dict, Optional, Sequence, Tuple
from dataclasses import dataclass, replace
from enum import Enum

from ..config import AUDIO_SAMPLE_RATE, AUDIO_CHANNELS


class WaveType(Enum):
    """Bentuk gelombang dasar"""
    SINE = "sine"
    SQUARE = "square"
    SAWTOOTH = "sawtooth"
    TRIANGLE = "triangle"
    NOISE = "noise"


@dataclass(frozen=True)
class SoundParams:
    """One synthesized sound. Frozen so it can key the cache directly."""
    frequency: float = 440.0
    duration: float = 0.2
    volume: float = 0.5
    wave_type: WaveType = WaveType.SINE

    # ADSR, seconds (sustain is a level)
    attack: float = 0.01
    decay: float = 0.05
    sustain: float = 0.7
    release: float = 0.1

    pitch_bend: float = 0.0      # semitones per second
    vibrato_freq: float = 0.0
    vibrato_depth: float = 0.0   # semitones
    noise_mix: float = 0.0


def _cycle_position(phase: np.ndarray) -> np.ndarray:
    """0..1 position inside the current cycle"""
    return (phase / (2 * np.pi)) % 1


class SoundGenerator:
    """
    synthesize() -> float samples in [-1, 1]
    generate()   -> cached pygame Sound
    """

    def __init__(self, sample_rate: int = AUDIO_SAMPLE_RATE,
                 rng: Optional[np.random.Generator] = None):
        self.sample_rate = sample_rate
        self.rng = rng or np.random.default_rng()
        self._cache: Dict[SoundParams, pygame.mixer.Sound] = {}

    def generate(self, params: SoundParams) -> pygame.mixer.Sound:
        if params not in self._cache:
            self._cache[params] = self.to_sound(self.synthesize(params))
        return self._cache[params]

    def synthesize(self, params: SoundParams) -> np.ndarray:
        n = int(params.duration * self.sample_rate)
        t = np.arange(n, dtype=np.float32) / self.sample_rate

        # Per-sample pitch in semitones relative to the base frequency
        semitones = params.pitch_bend * t
        if params.vibrato_freq > 0 and params.vibrato_depth > 0:
            semitones = semitones + params.vibrato_depth * np.sin(
                2 * np.pi * params.vibrato_freq * t)
        freq = params.frequency * np.power(2.0, semitones / 12)
        phase = 2 * np.pi * np.cumsum(freq) / self.sample_rate

        samples = self._wave(phase, params.wave_type)
        if params.noise_mix > 0:
            noise = self.rng.uniform(-1, 1, n)
            samples = (1 - params.noise_mix) * samples + params.noise_mix * noise

        samples = samples * self._envelope(params, n) * params.volume
        return np.clip(samples, -1, 1).astype(np.float32)

    def sequence(self, notes: Sequence[Tuple[float, float]],
                 base: SoundParams) -> pygame.mixer.Sound:
        """
        (frequency, duration) notes back to back, memakai envelope dari base.
        Frequency 0 = rest.
        """
        parts = []
        for frequency, duration in notes:
            if frequency <= 0:
                parts.append(np.zeros(int(duration * self.sample_rate), dtype=np.float32))
            else:
                parts.append(self.synthesize(
                    replace(base, frequency=frequency, duration=duration)))
        return self.to_sound(np.concatenate(parts))

    def to_sound(self, samples: np.ndarray) -> pygame.mixer.Sound:
        pcm = (samples * 32767).astype(np.int16)
        if AUDIO_CHANNELS == 2:
            pcm = np.ascontiguousarray(np.repeat(pcm[:, None], 2, axis=1))
        return pygame.sndarray.make_sound(pcm)

    def _wave(self, phase: np.ndarray, wave_type: WaveType) -> np.ndarray:
        if wave_type == WaveType.SINE:
            return np.sin(phase)
        if wave_type == WaveType.SQUARE:
            return np.where(np.sin(phase) >= 0, 1.0, -1.0)
        if wave_type == WaveType.SAWTOOTH:
            return 2 * _cycle_position(phase) - 1
        if wave_type == WaveType.TRIANGLE:
            return 1 - 4 * np.abs(_cycle_position(phase) - 0.5)
        return self.rng.uniform(-1, 1, len(phase))

    def _envelope(self, params: SoundParams, n: int) -> np.ndarray:
        """ADSR; A/D/R shrink proportionally when the sound is too short"""
        a, d, r = (int(s * self.sample_rate)
                   for s in (params.attack, params.decay, params.release))
        if a + d + r > n:
            scale = n / (a + d + r)
            a, d = int(a * scale), int(d * scale)
            r = n - a - d
        s = n - a - d - r

        envelope = np.concatenate([
            np.linspace(0, 1, a, endpoint=False),
            np.linspace(1, params.sustain, d, endpoint=False),
            np.full(s, params.sustain),
            np.linspace(params.sustain, 0, r),
        ])
        return envelope.astype(np.float32)


# Minor-key loop, (frequency Hz, seconds)
BACKGROUND_NOTES = [
    (220.0, 0.3), (261.6, 0.3), (329.6, 0.3), (261.6, 0.3),
    (196.0, 0.3), (246.9, 0.3), (293.7, 0.3), (0, 0.3),
    (174.6, 0.3), (220.0, 0.3), (261.6, 0.3), (220.0, 0.3),
    (164.8, 0.3), (207.7, 0.3), (246.9, 0.6),
]

SFX_PARAMS = {
    # Tanjiro: airy falling whoosh
    'sword': SoundParams(frequency=900, duration=0.18, volume=0.5,
                         wave_type=WaveType.NOISE, attack=0.005, decay=0.03,
                         sustain=0.4, release=0.12, pitch_bend=-90),
    # Demon: rising wobbling saw
    'magic': SoundParams(frequency=260, duration=0.35, volume=0.5,
                         wave_type=WaveType.SAWTOOTH, attack=0.02, decay=0.05,
                         sustain=0.6, release=0.2, pitch_bend=24,
                         vibrato_freq=12, vibrato_depth=2, noise_mix=0.15),
    'ko': SoundParams(frequency=150, duration=0.6, volume=0.8,
                      wave_type=WaveType.SAWTOOTH, attack=0.01, decay=0.1,
                      sustain=0.6, release=0.4, pitch_bend=-30,
                      vibrato_freq=5, vibrato_depth=2, noise_mix=0.3),
}

BACKGROUND_VOICE = SoundParams(volume=0.4, wave_type=WaveType.TRIANGLE,
                               attack=0.02, decay=0.05, sustain=0.6, release=0.1)


class ProceduralSFX:
    """
    Semua sound untuk duel, di-generate sekali.
    Nama: 'sword', 'magic', 'ko', 'bg_music'.
    """

    def __init__(self, generator: Optional[SoundGenerator] = None):
        self.generator = generator or SoundGenerator()
        self._sounds = {name: self.generator.generate(params)
                        for name, params in SFX_PARAMS.items()}
        self._sounds['bg_music'] = self.generator.sequence(BACKGROUND_NOTES,
                                                           BACKGROUND_VOICE)

    def get(self, name: str) -> Optional[pygame.mixer.Sound]:
        return self._sounds.get(name)
