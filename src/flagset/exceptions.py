# SPDX-FileCopyrightText: AISEC Pentesting Team
#
# SPDX-License-Identifier: Apache-2.0


class FlagDefinitionError(ValueError):
    """Raised when a flag cannot be registered, e.g. because its name
    or alias is already taken."""

    def __init__(self, name: str, message: str) -> None:
        self.name = name
        self.message = message

        super().__init__(message)

    def __str__(self) -> str:
        return f"flag '{self.name}': {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({repr(str(self))})"
