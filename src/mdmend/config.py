"""Configuration loader for mdmend.toml."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # type: ignore

from .core.model import PreprocessOptions

MODES = ("streaming", "static")


@dataclass
class PreprocessConfig:
    """Repair chain configuration."""
    single_dollar_text_math: bool = False
    fix_html: bool = False

    def options(self) -> PreprocessOptions:
        return PreprocessOptions(
            single_dollar_text_math=self.single_dollar_text_math,
            fix_html=self.fix_html,
        )


@dataclass
class StreamConfig:
    """Stream session configuration."""
    mode: str = "streaming"
    chunk_size: int = 1


@dataclass
class ParserConfig:
    """markdown-it preset configuration."""
    preset: str = "commonmark"


@dataclass
class LoggingConfig:
    """Logging configuration."""
    verbose: bool = False
    file: str | None = None


@dataclass
class MendConfig:
    """Complete mdmend configuration."""
    preprocess: PreprocessConfig = field(default_factory=PreprocessConfig)
    stream: StreamConfig = field(default_factory=StreamConfig)
    parser: ParserConfig = field(default_factory=ParserConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(config_path: Path | None = None) -> MendConfig:
    """
    Load configuration from mdmend.toml.

    Search order:
    1. config_path (if provided)
    2. cwd/mdmend.toml

    Unknown keys are ignored; missing ones keep their defaults.

    Args:
        config_path: Explicit path to config file

    Returns:
        MendConfig with resolved settings

    Raises:
        ValueError: If stream.mode is not "streaming" or "static"
    """
    toml_data: dict[str, Any] = {}

    search_paths = []
    if config_path:
        search_paths.append(Path(config_path))
    search_paths.append(Path.cwd() / "mdmend.toml")

    for path in search_paths:
        if path.exists():
            with open(path, "rb") as f:
                toml_data = tomllib.load(f)
            break

    preprocess_data = toml_data.get("preprocess", {})
    preprocess_config = PreprocessConfig(
        single_dollar_text_math=bool(preprocess_data.get("single_dollar_text_math", False)),
        fix_html=bool(preprocess_data.get("fix_html", False)),
    )

    stream_data = toml_data.get("stream", {})
    mode = stream_data.get("mode", "streaming")
    if mode not in MODES:
        raise ValueError(f"Invalid stream mode: {mode!r} (expected one of {', '.join(MODES)})")
    stream_config = StreamConfig(
        mode=mode,
        chunk_size=max(1, int(stream_data.get("chunk_size", 1))),
    )

    parser_data = toml_data.get("parser", {})
    parser_config = ParserConfig(
        preset=parser_data.get("preset", "commonmark")
    )

    logging_data = toml_data.get("logging", {})
    logging_config = LoggingConfig(
        verbose=bool(logging_data.get("verbose", False)),
        file=logging_data.get("file"),
    )

    return MendConfig(
        preprocess=preprocess_config,
        stream=stream_config,
        parser=parser_config,
        logging=logging_config,
    )
