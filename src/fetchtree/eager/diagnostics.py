from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass
class Diagnostic:
    code: str
    message: str
    path: str  # dotted relation path from the root entity, "" for the root
    severity: Severity

    def is_under(self, path: str) -> bool:
        if not path:
            return True
        return self.path == path or self.path.startswith(path + ".")


@dataclass
class Diagnostics:
    messages: List[Diagnostic] = field(default_factory=list)

    def add(self, code: str, message: str, path: str, severity: Severity) -> None:
        self.messages.append(Diagnostic(code=code, message=message, path=path, severity=severity))

    def has_errors(self) -> bool:
        return any(msg.severity == Severity.ERROR for msg in self.messages)

    def warnings(self) -> List[Diagnostic]:
        return [msg for msg in self.messages if msg.severity == Severity.WARNING]

    def by_code(self, code: str) -> List[Diagnostic]:
        return [msg for msg in self.messages if msg.code == code]

    def under(self, path: str) -> List[Diagnostic]:
        """Diagnostics raised at ``path`` or anywhere below it."""
        return [msg for msg in self.messages if msg.is_under(path)]
