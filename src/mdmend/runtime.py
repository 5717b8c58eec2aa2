"""Runtime wiring helper for CLI applications."""

from dataclasses import dataclass
from pathlib import Path

from .adapters.markdown_parser import MarkdownParser
from .adapters.yaml_codec import YamlFrontmatter
from .config import MendConfig, load_config
from .core.model import PreprocessOptions
from .stream import StreamSession


@dataclass
class Runtime:
    """Container for all wired components."""
    config: MendConfig
    options: PreprocessOptions
    parser: MarkdownParser
    frontmatter: YamlFrontmatter

    def session(self, mode: str | None = None) -> StreamSession:
        return StreamSession(
            mode=mode or self.config.stream.mode,
            options=self.options,
            parser=self.parser,
            frontmatter=self.frontmatter,
        )


def build_runtime(
    config_path: Path | None = None,
    single_dollar_text_math: bool | None = None,
    fix_html: bool | None = None,
) -> Runtime:
    """Build and wire all components; explicit arguments override the config file."""
    config = load_config(config_path=config_path)

    if single_dollar_text_math is not None:
        config.preprocess.single_dollar_text_math = single_dollar_text_math
    if fix_html is not None:
        config.preprocess.fix_html = fix_html

    options = config.preprocess.options()
    parser = MarkdownParser(
        preset=config.parser.preset,
        single_dollar_text_math=options.single_dollar_text_math,
    )

    return Runtime(
        config=config,
        options=options,
        parser=parser,
        frontmatter=YamlFrontmatter(),
    )
