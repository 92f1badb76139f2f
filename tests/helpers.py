"""Random sources with scripted or counted draws for the fault-layer tests."""
from src.FaultLogic import RandomSource


class CountingSource(RandomSource):
    """Real generator that counts how many draws were consumed."""

    def __init__(self, seed=None):
        super().__init__(seed)
        self.uniform_calls = 0
        self.integer_calls = 0

    def uniform(self):
        self.uniform_calls += 1
        return super().uniform()

    def integer(self, upper):
        self.integer_calls += 1
        return super().integer(upper)


class ScriptedSource(RandomSource):
    """Returns pre-set values in order."""

    def __init__(self, uniforms=(), integers=()):
        super().__init__(0)
        self.uniforms = list(uniforms)
        self.integers = list(integers)

    def uniform(self):
        return self.uniforms.pop(0)

    def integer(self, upper):
        value = self.integers.pop(0)
        assert 0 <= value <= upper
        return value
