"""Wire-level types for parsed JSONL log lines."""

from dataclasses import dataclass, field


@dataclass
class TokenUsage:
    input_tokens: int = 0
    output_tokens: int = 0
    cache_creation_input_tokens: int = 0
    cache_read_input_tokens: int = 0

    @property
    def total(self) -> int:
        return (self.input_tokens + self.output_tokens +
                self.cache_creation_input_tokens + self.cache_read_input_tokens)

    @property
    def is_zero(self) -> bool:
        return self.total == 0


@dataclass
class AssistantMessage:
    id: str = ""
    model: str = ""
    usage: TokenUsage = field(default_factory=TokenUsage)


@dataclass
class LogEntry:
    """One JSON line from a session or subagent log."""
    type: str = ""
    timestamp: str = ""
    cwd: str = ""
    message: AssistantMessage = field(default_factory=AssistantMessage)
