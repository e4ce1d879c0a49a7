"""Tests for line input providers."""
from trip_planner.services.prompt import ConsolePrompt, ScriptedPrompt


class TestConsolePrompt:
    """Test the terminal prompt."""

    def test_returns_typed_text(self, monkeypatch):
        asked = []

        def fake_input(message):
            asked.append(message)
            return "Snorkeling"

        monkeypatch.setattr("builtins.input", fake_input)

        assert ConsolePrompt().ask("Enter the activity:") == "Snorkeling"
        assert asked == ["Enter the activity: "]

    def test_eof_is_cancel(self, monkeypatch):
        def fake_input(message):
            raise EOFError

        monkeypatch.setattr("builtins.input", fake_input)

        assert ConsolePrompt().ask("Enter the expense:") is None

    def test_interrupt_is_cancel(self, monkeypatch):
        def fake_input(message):
            raise KeyboardInterrupt

        monkeypatch.setattr("builtins.input", fake_input)

        assert ConsolePrompt().ask("Enter the travel companion name:") is None


class TestScriptedPrompt:
    """Test canned answers."""

    def test_answers_in_order_then_cancels(self):
        prompt = ScriptedPrompt(["one", "two"])

        assert prompt.ask("q1") == "one"
        assert prompt.ask("q2") == "two"
        assert prompt.ask("q3") is None
        assert prompt.asked == ["q1", "q2", "q3"]
