import pytest


class ScriptedRandom:
    """Random source replaying scripted values.

    random() pops from `randoms` and falls back to 0.99, so no probability
    roll succeeds unless scripted. choice() pops an index from `choices` and
    falls back to the first element.
    """
    def __init__(self, randoms=(), choices=()):
        self.randoms = list(randoms)
        self.choices = list(choices)

    def random(self):
        return self.randoms.pop(0) if self.randoms else 0.99

    def choice(self, seq):
        index = self.choices.pop(0) if self.choices else 0
        return seq[index]

    def randrange(self, stop):
        return 0


@pytest.fixture
def scripted():
    return ScriptedRandom
