from models import PlaybackOptions
from playback import Playback


def test_tick_advances_and_pauses_at_last_frame() -> None:
    playback = Playback(3)
    playback.play()

    assert playback.tick() is True
    assert playback.step == 1
    assert playback.is_playing is True
    assert playback.tick() is True
    assert playback.step == 2
    assert playback.is_playing is False
    assert playback.tick() is False


def test_play_is_ignored_without_frames_or_at_end() -> None:
    empty = Playback(0)
    empty.play()
    assert empty.is_playing is False
    assert empty.can_step_forward is False

    single = Playback(1)
    assert single.toggle() is False


def test_step_controls_are_clamped() -> None:
    playback = Playback(4)

    playback.step_back()
    assert playback.step == 0
    assert playback.can_step_back is False
    playback.jump(10)
    assert playback.step == 3
    assert playback.at_end is True
    playback.step_back()
    assert playback.step == 2
    playback.step_forward()
    playback.step_forward()
    assert playback.step == 3


def test_reset_and_load_return_to_start() -> None:
    playback = Playback(5)
    playback.jump(3)
    playback.play()

    playback.reset()
    assert (playback.step, playback.is_playing) == (0, False)

    playback.jump(4)
    playback.load(2)
    assert playback.step == 0
    assert playback.last_step == 1


def test_speed_is_snapped_and_clamped() -> None:
    playback = Playback(3, PlaybackOptions(speed_ms=640))

    assert playback.speed_ms == 650
    assert playback.set_speed(20) == 200
    assert playback.set_speed(5000) == 2000
    assert playback.set_speed(1234) == 1250
