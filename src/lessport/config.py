from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class HttpTimeout:
    """Timeout settings handed to the HTTP client."""

    connect: float = 5.0
    read: float = 60.0


@dataclass(frozen=True)
class LessPortConfig:
    reference_dir: str = "./test/sass-compiled-css-reference/"
    repo: str = "twbs/bootstrap"
    api_base: str = "https://api.github.com"
    user_agent: str = "seanCodes/bootstrap-less-port"
    max_redirects: int = 5
    timeout: HttpTimeout = field(default_factory=HttpTimeout)
