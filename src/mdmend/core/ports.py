from typing import Any, Protocol


class Fixer(Protocol):
    """
    Pure text transform repairing one construct's trailing incompleteness.
    Must be total over str and never touch code content.
    """

    def __call__(self, content: str) -> str:
        pass


class ParserStrategy(Protocol):
    """
    Markdown parser consuming repaired text. Treated as a black box;
    the repair chain only promises it complete-looking input.
    """

    def parse(self, text: str) -> list[Any]:
        pass

    def render(self, text: str) -> str:
        pass

    def tree(self, tokens: list[Any]) -> Any:
        pass

    def post_fix(self, tokens: list[Any]) -> Any:
        pass

    def annotate_loading(self, tokens: list[Any], loading: bool) -> Any:
        pass


class FrontmatterCodec(Protocol):
    """
    Decode an optional frontmatter header without enforcing schema.
    A header that does not parse yet yields None while streaming.
    """

    def decode(self, text: str, streaming: bool = False) -> tuple[dict[str, Any] | None, str]:
        pass
