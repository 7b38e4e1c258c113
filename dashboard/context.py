from dataclasses import dataclass
from typing import Any, Callable, Optional


@dataclass
class AuthUser:
    id: str
    email: str
    first_name: str = ""
    last_name: str = ""


@dataclass
class DashboardContext:
    user: Optional[AuthUser]
    client: Any
    sign_out: Callable[[], None]
