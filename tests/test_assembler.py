"""Tests for Gemini request assembly."""

from assistant.assembler import (
    HISTORY_WINDOW,
    assemble_contents,
    build_request_body,
    to_gemini_role,
)
from assistant.core.prompt import SYSTEM_PROMPT, build_vehicle_note


def texts(contents):
    return [c["parts"][0]["text"] for c in contents]


class TestRoleMapping:
    def test_assistant_maps_to_model(self):
        assert to_gemini_role("assistant") == "model"

    def test_user_maps_to_user(self):
        assert to_gemini_role("user") == "user"

    def test_unknown_and_missing_map_to_user(self):
        assert to_gemini_role("system") == "user"
        assert to_gemini_role(None) == "user"


class TestAssembleContents:
    def test_minimal_request(self):
        contents = assemble_contents("Hola", [], None)
        assert texts(contents) == [SYSTEM_PROMPT, "Hola"]
        assert [c["role"] for c in contents] == ["user", "user"]

    def test_vehicle_note_follows_system_prompt(self):
        history = [{"role": "user", "content": "Tengo una Honda CBR 2015"}]
        contents = assemble_contents(
            "¿Qué pastillas de freno me recomiendas?", history, "Tengo una Honda CBR 2015"
        )
        assert texts(contents) == [
            SYSTEM_PROMPT,
            build_vehicle_note("Tengo una Honda CBR 2015"),
            "Tengo una Honda CBR 2015",
            "¿Qué pastillas de freno me recomiendas?",
        ]
        note = texts(contents)[1]
        assert "Tengo una Honda CBR 2015" in note
        assert "No vuelvas a pedir marca, modelo ni año" in note

    def test_history_roles_are_mapped(self):
        history = [
            {"role": "user", "content": "Hola"},
            {"role": "assistant", "content": "¿Qué moto tienes?"},
        ]
        contents = assemble_contents("Una Yamaha", history)
        assert [c["role"] for c in contents] == ["user", "user", "model", "user"]

    def test_history_is_truncated_to_window(self):
        history = [
            {"role": "user" if i % 2 == 0 else "assistant", "content": f"turn {i}"}
            for i in range(20)
        ]
        contents = assemble_contents("ahora", history)

        assert len(contents) == 1 + HISTORY_WINDOW + 1
        assert texts(contents)[1:-1] == [f"turn {i}" for i in range(12, 20)]
        assert texts(contents)[0] == SYSTEM_PROMPT
        assert texts(contents)[-1] == "ahora"

    def test_short_history_is_kept_whole(self):
        history = [{"role": "user", "content": f"turn {i}"} for i in range(3)]
        contents = assemble_contents("ahora", history)
        assert texts(contents)[1:-1] == ["turn 0", "turn 1", "turn 2"]

    def test_history_accepts_generators(self):
        history = ({"role": "user", "content": f"turn {i}"} for i in range(10))
        contents = assemble_contents("ahora", history)
        assert len(contents) == 1 + HISTORY_WINDOW + 1


class TestBuildRequestBody:
    def test_without_generation_config(self, settings):
        body = build_request_body([{"role": "user", "parts": [{"text": "x"}]}], settings)
        assert body == {"contents": [{"role": "user", "parts": [{"text": "x"}]}]}

    def test_with_generation_config(self, settings):
        settings.temperature = 0.3
        settings.top_p = 0.9
        body = build_request_body([], settings)
        assert body["generationConfig"] == {"temperature": 0.3, "topP": 0.9}
