"""Accumulate streamed Markdown and render a repaired view after every chunk."""

from .adapters.yaml_codec import YamlFrontmatter
from .config import MODES
from .core.model import PreprocessOptions, RenderState
from .core.ports import FrontmatterCodec, ParserStrategy
from .logging import get_logger
from .repair.normalize import normalize
from .repair.pipeline import preprocess

logger = get_logger("stream")


def _check_mode(mode: str) -> str:
    if mode not in MODES:
        raise ValueError(f"Unknown mode: {mode!r} (expected one of {', '.join(MODES)})")
    return mode


class StreamSession:
    """
    Holds the raw text received so far.

    In ``streaming`` mode every render runs ``preprocess(normalize(raw))``;
    in ``static`` mode the normalized text is used as-is. The parser is
    optional and only consulted when one is passed in; while streaming its
    tokens get the trailing-dollar fix before the loading flag is set.
    """

    def __init__(
        self,
        mode: str = "streaming",
        options: PreprocessOptions | None = None,
        parser: ParserStrategy | None = None,
        frontmatter: FrontmatterCodec | None = None,
    ):
        self.mode = _check_mode(mode)
        self.options = options or PreprocessOptions()
        self.parser = parser
        self.frontmatter = frontmatter or YamlFrontmatter()
        self.raw = ""
        self.state: RenderState | None = None

    def append(self, chunk: str) -> RenderState:
        self.raw += chunk
        return self.render()

    def update(self, content: str) -> RenderState:
        self.raw = content
        return self.render()

    def reset(self) -> None:
        self.raw = ""
        self.state = None

    def set_mode(self, mode: str) -> RenderState:
        self.mode = _check_mode(mode)
        logger.debug("mode set to %s", mode)
        return self.render()

    def render(self) -> RenderState:
        normalized = normalize(self.raw)
        streaming = self.mode == "streaming"
        content = preprocess(normalized, self.options) if streaming else normalized
        loading = streaming and content != normalized

        meta, _body = self.frontmatter.decode(content, streaming=streaming)

        tokens = []
        tree = None
        if self.parser is not None:
            tokens = self.parser.parse(content)
            if streaming:
                self.parser.post_fix(tokens)
            self.parser.annotate_loading(tokens, loading)
            tree = self.parser.tree(tokens)

        logger.debug("rendered %d chars (mode=%s, loading=%s)", len(self.raw), self.mode, loading)
        self.state = RenderState(
            raw=self.raw,
            content=content,
            mode=self.mode,
            loading=loading,
            meta=meta,
            tree=tree,
            tokens=tokens,
        )
        return self.state
