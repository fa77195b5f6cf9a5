"""Code generation exceptions."""

from ..errors import ElmTestError, ErrorKind


class TemplateMismatchError(ElmTestError):
    """Raised when a template's placeholders differ from the replacement keys."""

    kind = ErrorKind.INTERNAL

    def __init__(self, missing: set[str], unused: set[str], template: str | None = None):
        self.missing = missing
        self.unused = unused
        self.template = template
        details = []
        if missing:
            details.append("no replacement for " + ", ".join(sorted(missing)))
        if unused:
            details.append("unused replacements " + ", ".join(sorted(unused)))
        where = f" in {template}" if template else ""
        super().__init__(
            f"The template does not match with the replacement keys{where}: "
            + "; ".join(details)
        )


class PatchPatternNotFoundError(ElmTestError):
    """Raised when compiled output lacks a definition the patcher rewrites."""

    kind = ErrorKind.INTERNAL

    def __init__(self, pattern_name: str):
        self.pattern_name = pattern_name
        super().__init__(
            f"Could not find {pattern_name} in the compiled runner; "
            "the compiler or test library output format may have changed"
        )
