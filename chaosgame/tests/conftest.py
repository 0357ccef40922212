import pytest


class ScriptedRng:
    """Детермінований замінник random.Random: choice() віддає заздалегідь задані точки."""

    def __init__(self, picks):
        self.picks = list(picks)
        self.calls = 0

    def choice(self, seq):
        pick = self.picks[self.calls]
        self.calls += 1
        assert pick in seq
        return pick


@pytest.fixture
def scripted():
    return ScriptedRng
