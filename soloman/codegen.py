BACKENDS = {}


def register(name):
    def wrap(cls):
        cls.name = name
        BACKENDS[name] = cls
        return cls
    return wrap


class CodeGen:
    """
    A backend lowers a parsed ``Program`` into the text of one artifact.

    ``artifact`` is the fixed file name the text is saved under. Lowering
    builds the whole artifact in memory; nothing touches the filesystem.
    Once the artifact is saved, ``finish`` hands it to the external
    toolchain. Backends with ``linkable`` set only do so when asked to link.
    """

    name = None
    artifact = None
    linkable = False

    def lower_program(self, program) -> str:
        raise NotImplementedError

    def finish(self, output, link=False):
        pass

    def success_message(self):
        return f"Output written to {self.artifact}"
