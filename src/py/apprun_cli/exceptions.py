"""apprun-cli exception classes."""

__all__ = [
    "ApprunCliError",
    "CommandExecutionError",
    "ExecutableNotFoundError",
    "PackageManifestError",
    "TemplateWriteError",
    "UnknownTemplateError",
]


class ApprunCliError(Exception):
    """Base exception for apprun-cli related errors."""


class UnknownTemplateError(ApprunCliError, KeyError):
    """Raised when a template identifier is not registered."""

    def __init__(self, template_id: str) -> None:
        super().__init__(f"Template {template_id!r} is not registered.")
        self.template_id = template_id

    def __str__(self) -> str:
        return str(self.args[0])


class TemplateWriteError(ApprunCliError):
    """Raised when a rendered template cannot be written to disk.

    The underlying ``OSError`` is chained as ``__cause__``.
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Could not write {path!r}: {reason}")
        self.path = path


class ExecutableNotFoundError(ApprunCliError):
    """Raised when an executable is not found."""

    def __init__(self, executable: str) -> None:
        super().__init__(f"Executable {executable!r} not found.")
        self.executable = executable


class CommandExecutionError(ApprunCliError):
    """Raised when an external command exits with a non-zero status."""

    def __init__(self, command: list[str], return_code: int, stderr: str) -> None:
        super().__init__(f"Command {command!r} failed with return code {return_code}.\nStderr: {stderr}")
        self.command = command
        self.return_code = return_code
        self.stderr = stderr


class PackageManifestError(ApprunCliError):
    """Raised when package.json is missing or malformed."""

    def __init__(self, manifest_path: str, reason: str) -> None:
        super().__init__(f"Invalid package manifest at {manifest_path!r}: {reason}")
        self.manifest_path = manifest_path
