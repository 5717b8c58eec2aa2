import io
import re
from typing import Any

import yaml

from ..core.ports import FrontmatterCodec

_FM = re.compile(r"^\s*---\s*\n(.*?)\n---\s*(?:\n|\Z)", re.DOTALL)


class YamlFrontmatter(FrontmatterCodec):
    def decode(self, text: str, streaming: bool = False) -> tuple[dict[str, Any] | None, str]:
        m = _FM.match(text)
        if not m:
            # No header, or one still being streamed
            return None, text
        body = text[m.end():]
        try:
            fm = yaml.safe_load(io.StringIO(m.group(1)))
        except yaml.YAMLError:
            if not streaming:
                raise
            return None, body
        if fm is None:
            return {}, body
        if not isinstance(fm, dict):
            return None, body
        return fm, body
