import pytest


@pytest.fixture
def answers(monkeypatch):
    """Feed scripted answers to input(); EOFError once they run out"""
    def feed(*values):
        queue = list(values)
        prompts = []

        def fake_input(prompt=""):
            prompts.append(prompt)
            if not queue:
                raise EOFError
            return queue.pop(0)

        monkeypatch.setattr("builtins.input", fake_input)
        return prompts
    return feed
