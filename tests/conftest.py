import pytest


class ScriptedRandom:
    def __init__(self, values):
        self.values= list(values)

    def random(self):
        return self.values.pop(0)


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture
def writePoints(tmp_path):
    def write(lines, name="points.txt"):
        path= tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return str(path)
    return write
