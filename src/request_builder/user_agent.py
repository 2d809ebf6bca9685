"""Process-wide default User-Agent used when a request does not set one."""

from .exceptions import InvalidArgumentError

DEFAULT_USER_AGENT = "RequestBuilder/1.0"

_default_user_agent = DEFAULT_USER_AGENT


def get_default_user_agent() -> str:
    """Return the User-Agent sent by requests that never set their own."""
    return _default_user_agent


def set_default_user_agent(user_agent: str) -> None:
    """
    Replace the process-wide default User-Agent.

    Args:
        user_agent: Non-empty User-Agent string

    Raises:
        InvalidArgumentError: If user_agent is not a non-empty string
    """
    global _default_user_agent

    if not isinstance(user_agent, str) or not user_agent.strip():
        raise InvalidArgumentError("user_agent", user_agent, "non-empty string")
    _default_user_agent = user_agent


def reset_default_user_agent() -> None:
    global _default_user_agent
    _default_user_agent = DEFAULT_USER_AGENT
