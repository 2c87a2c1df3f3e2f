import numpy as np
import pygame

from .sim import MAX_VALUE, Step

SAMPLE_RATE = 44100


class SoundEngine:
    """Short square-wave blips pitched by the value under the cursor."""

    def __init__(self, min_freq=220, max_freq=880, enabled=True):
        self.min_freq = min_freq
        self.max_freq = max_freq
        self.duration = 0.05
        self.chunk = max(256, int(SAMPLE_RATE * self.duration))
        self.channel = None
        self.cache = {}
        self.enabled = False
        if enabled:
            self._init_mixer()

    def _init_mixer(self):
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(SAMPLE_RATE, -16, 1, 512)
            self.channel = pygame.mixer.Channel(0)
            self.enabled = True
        except pygame.error:
            self.enabled = False

    def frequency(self, value):
        ratio = int(value) / MAX_VALUE
        return int(self.min_freq + (self.max_freq - self.min_freq) * ratio)

    def on_step(self, snapshot):
        """Play the tone for a snapshot taken right after advance()."""
        if not self.enabled:
            return
        if snapshot.step is Step.COMPARE:
            value = snapshot.items[snapshot.cursor]
            volume = 0.2
        elif snapshot.step is Step.SWAP_HAPPENED:
            value = snapshot.items[snapshot.cursor + 1]
            volume = 0.4
        else:
            return

        freq = self.frequency(value)
        try:
            sound = self.cache.get(freq)
            if sound is None:
                sound = pygame.sndarray.make_sound(self._generate_wave(freq))
                self.cache[freq] = sound
            sound.set_volume(volume)
            self.channel.play(sound)
        except pygame.error:
            self.enabled = False

    def _generate_wave(self, freq):
        t = np.linspace(0, self.duration, self.chunk, False)
        waveform = 0.5 * np.sign(np.sin(2 * np.pi * freq * t))
        waveform *= np.linspace(1.0, 0.0, self.chunk)
        wave = np.int16(waveform * 32767)
        # make_sound wants one column per mixer channel
        channels = pygame.mixer.get_init()[2]
        if channels == 2:
            wave = np.column_stack((wave, wave))
        return wave
