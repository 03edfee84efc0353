"""
Exceptions for sspmapper

Data-shape problems inside a parsed document are reported as validation
diagnostics or absorbed by defaults; only the cases below raise.
"""

from typing import Any, Dict, Optional


class SSPMapperError(Exception):
    """Base exception carrying optional context"""

    def __init__(self, msg: str, ctx: Optional[Dict[str, Any]] = None):
        super().__init__(msg)
        self.msg = msg
        self.ctx = ctx or {}

    def __str__(self) -> str:
        if self.ctx:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.ctx.items())
            return f"{self.msg} [{ctx_str}]"
        return self.msg


class DocumentParseError(SSPMapperError):
    """Raised when the input cannot be parsed as an XML tree at all"""


class RendererError(SSPMapperError):
    """Raised by Renderer implementations when an artifact cannot be produced"""
