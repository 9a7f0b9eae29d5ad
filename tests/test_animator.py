"""Animator-side tests: daylight cycle, completion chime and framer layout."""

import math

import numpy as np
import pygame
import pytest

from environment import Environment, Role
from experimenter.animator import CompletionChime, PygameFramer
from experimenter.animator.chime import synthesize_chime
from experimenter.animator.daylight import (
    DAY_SKY, MAX_ILLUMINANCE, NIGHT_SKY, light_level, shade, sky_color, sun_illuminance, sun_position,
)
from experimenter.config import create_default_config


def test_sun_position_follows_day_length():
    assert sun_position(0.0) == pytest.approx((0.0, 1.0))
    y, z = sun_position(64.0 * math.pi / 2, day_length=64.0)
    assert y == pytest.approx(1.0)
    assert z == pytest.approx(0.0, abs=1e-12)


def test_sun_illuminance_is_zero_at_night():
    assert sun_illuminance(64.0 * math.pi / 2) == pytest.approx(MAX_ILLUMINANCE)
    assert sun_illuminance(64.0 * 3 * math.pi / 2) == 0.0
    assert sun_illuminance(0.0) == 0.0


def test_sky_color_blends_night_to_day():
    assert sky_color(64.0 * math.pi / 2) == DAY_SKY
    assert sky_color(64.0 * 3 * math.pi / 2) == NIGHT_SKY


def test_light_level_bounds():
    assert light_level(0.0, ambient=0.7) == pytest.approx(0.7)
    assert light_level(64.0 * math.pi / 2, ambient=0.7) == pytest.approx(1.0)


def test_shade_converts_and_clamps():
    assert shade((1.0, 0.5, 0.0), 1.0) == (255, 128, 0)
    assert shade((1.0, 1.0, 1.0), 2.0) == (255, 255, 255)


def test_synthesized_chime_format():
    samples = synthesize_chime(sample_rate=8000, duration=0.5, volume=0.5)
    assert samples.shape == (4000, 2)
    assert samples.dtype == np.int16
    assert np.abs(samples).max() <= int(0.5 * 32767)
    assert np.abs(samples).max() > 0
    np.testing.assert_array_equal(samples[:, 0], samples[:, 1])


class _CountingSound:
    def __init__(self):
        self.plays = 0

    def play(self):
        self.plays += 1


def test_chime_plays_once_per_run():
    chime = CompletionChime()
    chime.sound = _CountingSound()
    chime.enabled = True
    chime.play()
    chime.play()
    assert chime.sound.plays == 1

    chime.reset()
    chime.play()
    assert chime.sound.plays == 2


def test_chime_without_mixer_is_silent():
    chime = CompletionChime()
    chime.play()
    assert chime.played


class _BufferOnlySound:
    """Mixer sound that rejects files, as a corrupt asset does."""

    def __init__(self, file=None, buffer=None):
        if file is not None:
            raise pygame.error(f"Unable to load {file}")
        self.buffer = buffer


def test_chime_falls_back_when_sound_file_is_corrupt(tmp_path, monkeypatch):
    sound_file = tmp_path / "sort_complete.ogg"
    sound_file.write_bytes(b"not an ogg stream")
    monkeypatch.setattr(pygame.mixer, "pre_init", lambda *args, **kwargs: None)
    monkeypatch.setattr(pygame.mixer, "init", lambda *args, **kwargs: None)
    monkeypatch.setattr(pygame.mixer, "Sound", _BufferOnlySound)

    chime = CompletionChime(str(sound_file))
    chime.start()
    assert chime.enabled
    assert chime.sound.buffer == synthesize_chime().tobytes()


def test_framer_fits_all_pillars():
    config = create_default_config(number_of_pillars=100)
    framer = PygameFramer(config, window_size=(1000, 600))
    first = framer._pillar_rect(0, config.maximum_pillar_height)
    last = framer._pillar_rect(99, config.maximum_pillar_height)
    assert first.left == framer.margin
    assert last.right <= 1000 - framer.margin + 1
    assert first.bottom == 600 - framer.ground_height


def test_framer_pan_and_zoom_stay_in_bounds():
    config = create_default_config(number_of_pillars=100)
    framer = PygameFramer(config, window_size=(1000, 600))
    fit = framer.zoom
    framer.pan(-1.0)
    assert framer.camera_x == 0.0
    framer.zoom_by(0.5)
    assert framer.zoom == fit
    framer.zoom_by(4.0)
    framer.pan(1.0)
    assert framer.camera_x > 0.0
    framer.reset_view()
    assert (framer.camera_x, framer.zoom) == (0.0, fit)


def test_framer_renders_with_dummy_display(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    config = create_default_config(initial_heights=[3.0, 1.0, 4.0, 1.0], window_size=(320, 240))
    environment = Environment(config)
    framer = PygameFramer(config)
    framer.start()
    try:
        environment.step()
        assert framer.render_frame(environment.get_render_data())
        assert environment.get_render_data()['roles'][0] is Role.OUTER
        assert framer.running and not framer.paused

        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
        assert framer.render_frame(environment.get_render_data())
        assert framer.paused

        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
        assert not framer.render_frame(environment.get_render_data())
        assert not framer.running
    finally:
        framer.finish()
        pygame.quit()
