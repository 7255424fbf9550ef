"""Error types raised by the localization sync pipeline."""

from typing import Optional


class L10nError(Exception):
    """Base class for every failure surfaced by l10nsync."""

    message = "Localization task failed"

    def __init__(self, path: str = "", cause: Optional[BaseException] = None):
        self.path = str(path)
        self.cause = cause
        super().__init__(self.describe())

    def describe(self) -> str:
        text = f"{self.message} at {self.path}"
        if self.cause is not None:
            text += f": {self.cause}"
        return text

    def __str__(self) -> str:
        return self.describe()


class DirectoryListingFailed(L10nError):
    message = "Failed to list directory"


class DocumentParseFailed(L10nError):
    message = "Failed to parse XML"


class WriteFailed(L10nError):
    message = "Failed to write file"


class DeleteFailed(L10nError):
    message = "Failed to delete file"


class DirectoryCreateFailed(L10nError):
    message = "Failed to create directory"


class StructuralQueryFailed(L10nError):
    """An XPath query could not be evaluated against a document."""

    message = "Failed to execute XPath query"

    def __init__(self, xpath: str, cause: Optional[BaseException] = None):
        self.xpath = xpath
        super().__init__(xpath, cause)

    def describe(self) -> str:
        text = f"{self.message} '{self.xpath}'"
        if self.cause is not None:
            text += f": {self.cause}"
        return text


class CopyFailed(L10nError):
    message = "Failed to copy file"

    def __init__(self, source: str, destination: str, cause: Optional[BaseException] = None):
        self.source = str(source)
        self.destination = str(destination)
        super().__init__(destination, cause)

    def describe(self) -> str:
        text = f"{self.message} from {self.source} to {self.destination}"
        if self.cause is not None:
            text += f": {self.cause}"
        return text


class ReplaceFailed(L10nError):
    """The atomic swap into the destination did not complete.

    ``temp_path`` points at the abandoned temporary copy, if one was made.
    """

    message = "Failed to replace file"

    def __init__(
        self,
        path: str,
        cause: Optional[BaseException] = None,
        temp_path: Optional[str] = None,
    ):
        self.temp_path = str(temp_path) if temp_path else None
        super().__init__(path, cause)


class InvalidXliffStructure(L10nError):
    message = "Invalid XLIFF structure"

    def __init__(self, path: str, details: str):
        self.details = details
        super().__init__(path)

    def describe(self) -> str:
        return f"{self.message} at {self.path}: {self.details}"


class ProcessLaunchFailed(L10nError):
    """The external tool could not be started at all."""

    message = "Failed to execute process"

    def __init__(self, command: str, cause: Optional[BaseException] = None):
        self.command = command
        super().__init__(command, cause)

    def describe(self) -> str:
        text = f"{self.message} '{self.command}'"
        if self.cause is not None:
            text += f": {self.cause}"
        return text


class ExternalToolFailed(L10nError):
    """The external tool ran but exited with a non-zero status."""

    message = "Command failed"

    def __init__(self, command: str, exit_code: int):
        self.command = command
        self.exit_code = exit_code
        super().__init__(command)

    def describe(self) -> str:
        return f"{self.message} '{self.command}' with exit code {self.exit_code}"
