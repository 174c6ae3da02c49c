class StubSource:
    """Fixed draws: normal() always returns `z`, uniform() the midpoint of its band."""

    def __init__(self, z: float = 0.0):
        self.z = z
        self.normal_calls = 0
        self.uniform_calls = 0

    def normal(self) -> float:
        self.normal_calls += 1
        return self.z

    def uniform(self, low: float, high: float) -> float:
        self.uniform_calls += 1
        return (low + high) / 2.0
