"""
Unit tests for scenes/models.py
"""

import pytest
from pydantic import ValidationError

from config.settings import settings
from scenes.models import OutputLine, Phase, Scene, TextSegment


def _phase(**overrides) -> Phase:
    fields = {"command": "ls", "command_start_frame": 10, "output_start_frame": 20}
    fields.update(overrides)
    return Phase(**fields)


class TestDefaults:

    def test_typing_speed_from_settings(self):
        assert _phase().typing_speed == settings.default_typing_speed

    def test_default_prompt_is_green_bold_dollar(self):
        assert _phase().prompt == (TextSegment(text="$ ", color="green", bold=True),)

    def test_default_output_line_is_blank(self):
        assert OutputLine().segments == (TextSegment(text=""),)

    def test_no_separator_or_typing_delay(self):
        phase = _phase()
        assert phase.separator is False
        assert phase.typing_start_frame == phase.command_start_frame


class TestImmutability:

    def test_segment_is_frozen(self):
        seg = TextSegment(text="x")
        with pytest.raises(ValidationError):
            seg.text = "y"

    def test_phase_is_frozen(self):
        with pytest.raises(ValidationError):
            _phase().command_start_frame = 0

    def test_json_arrays_become_tuples(self):
        scene = Scene.model_validate({"phases": [{
            "command": "ls", "command_start_frame": 0, "output_start_frame": 5,
            "output_lines": [{"segments": [{"text": "a"}]}],
        }]})
        phase = scene.phases[0]
        assert isinstance(scene.phases, tuple)
        assert isinstance(phase.output_lines, tuple)
        assert isinstance(phase.output_lines[0].segments, tuple)
        assert isinstance(phase.prompt, tuple)

    def test_phases_cannot_be_appended(self):
        scene = Scene(phases=[_phase()])
        with pytest.raises(AttributeError):
            scene.phases.append(_phase())

    def test_output_lines_cannot_be_replaced_in_place(self):
        phase = _phase(output_lines=[OutputLine(delay=1)])
        with pytest.raises(TypeError):
            phase.output_lines[0] = OutputLine(delay=-5)

    def test_shifted_scene_keeps_tuples(self):
        assert isinstance(Scene(phases=[_phase()]).shifted(3).phases, tuple)

    def test_non_finite_speed_rejected(self):
        with pytest.raises(ValidationError):
            _phase(typing_speed=float("inf"))


class TestShifted:

    def test_phase_shift_moves_both_starts(self):
        shifted = _phase().shifted(5)
        assert (shifted.command_start_frame, shifted.output_start_frame) == (15, 25)

    def test_zero_shift_returns_same_object(self):
        phase = _phase()
        assert phase.shifted(0) is phase

    def test_shift_leaves_original_untouched(self):
        phase = _phase()
        phase.shifted(100)
        assert phase.command_start_frame == 10

    def test_reveal_frame_follows_shift(self):
        line = OutputLine(delay=4)
        assert _phase(output_lines=[line]).shifted(6).reveal_frame(line) == 30

    def test_scene_shift(self):
        scene = Scene(phases=[_phase(), _phase(command_start_frame=50, output_start_frame=60)])
        assert [p.command_start_frame for p in scene.shifted(-10).phases] == [0, 40]


class TestLastRevealFrame:

    def test_includes_typing_start(self):
        scene = Scene(phases=[_phase(typing_delay=3)])
        assert scene.last_reveal_frame == 13

    def test_includes_latest_output_line(self):
        scene = Scene(phases=[_phase(output_lines=[OutputLine(delay=0), OutputLine(delay=9)])])
        assert scene.last_reveal_frame == 29

    def test_empty_scene(self):
        assert Scene().last_reveal_frame == 0
