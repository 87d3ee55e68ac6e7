"""Settings for the simulator that evaluates individuals."""

from __future__ import annotations

from typing import Any

from nmode.parsing import ParseElement

TAG_SIMULATOR = "simulator"
TAG_SIMULATOR_DEFINITION = "simulator_definition"
ENVIRONMENTS = ("YARS", "OpenAI")


class Simulator:
    """The ``simulator`` section of the configuration."""

    def __init__(self, parent: Any = None) -> None:
        self.parent = parent
        self.working_directory = "."
        self.xml = ""
        self.path = ""
        self.options = ""
        self.env = "YARS"
        self._nr = 1
        self._override_cpus = -1

    def add(self, element: ParseElement) -> Any:
        """Take in one parsed element; return the node that handles the next one."""
        if element.closing(TAG_SIMULATOR):
            return self.parent
        if element.opening(TAG_SIMULATOR):
            self.working_directory = element.get_str("wd", self.working_directory)
            self.xml = element.get_str("experiment", self.xml)
            self.path = element.get_str("path", self.path)
            self.options = element.get_str("options", self.options)
            self._nr = element.get_int("nr", self._nr)
            self.env = element.get_str("environment", self.env)
        return self

    def override_cpus(self, cpus: int) -> None:
        self._override_cpus = cpus

    def nr(self) -> int:
        """Number of simulators to run; a positive override takes precedence."""
        if self._override_cpus > 0:
            return self._override_cpus
        return self._nr