"""Model identifiers and their output-token ceilings."""

from enum import Enum


class ClaudeModel(str, Enum):
    """Models accepted by the messages endpoint.

    See https://docs.anthropic.com/en/docs/about-claude/models for details.
    """

    # Claude 3
    CLAUDE_3_OPUS_20240229 = "claude-3-opus-20240229"
    CLAUDE_3_SONNET_20240229 = "claude-3-sonnet-20240229"
    CLAUDE_3_HAIKU_20240307 = "claude-3-haiku-20240307"
    # Claude 3.5
    CLAUDE_3_5_SONNET_20240620 = "claude-3-5-sonnet-20240620"
    CLAUDE_3_5_HAIKU_20241022 = "claude-3-5-haiku-20241022"
    # Claude 3.7
    CLAUDE_3_7_SONNET_20250219 = "claude-3-7-sonnet-20250219"
    # Claude 4
    CLAUDE_OPUS_4_20250514 = "claude-opus-4-20250514"
    CLAUDE_SONNET_4_20250514 = "claude-sonnet-4-20250514"
    # Claude 4.1
    CLAUDE_OPUS_4_1_20250805 = "claude-opus-4-1-20250805"
    # Claude 4.5
    CLAUDE_SONNET_4_5_20250929 = "claude-sonnet-4-5-20250929"
    CLAUDE_HAIKU_4_5_20251001 = "claude-haiku-4-5-20251001"
    CLAUDE_OPUS_4_5_20251101 = "claude-opus-4-5-20251101"

    @property
    def max_tokens(self) -> int:
        """Largest ``max_tokens`` the model accepts."""
        return MAX_OUTPUT_TOKENS[self]

    def __str__(self) -> str:
        return self.value


MAX_OUTPUT_TOKENS: dict[ClaudeModel, int] = {
    ClaudeModel.CLAUDE_3_OPUS_20240229: 4096,
    ClaudeModel.CLAUDE_3_SONNET_20240229: 4096,
    ClaudeModel.CLAUDE_3_HAIKU_20240307: 4096,
    ClaudeModel.CLAUDE_3_5_SONNET_20240620: 4096,
    ClaudeModel.CLAUDE_3_5_HAIKU_20241022: 8192,
    ClaudeModel.CLAUDE_3_7_SONNET_20250219: 64000,
    ClaudeModel.CLAUDE_OPUS_4_20250514: 32000,
    ClaudeModel.CLAUDE_SONNET_4_20250514: 64000,
    ClaudeModel.CLAUDE_OPUS_4_1_20250805: 32000,
    ClaudeModel.CLAUDE_SONNET_4_5_20250929: 64000,
    ClaudeModel.CLAUDE_HAIKU_4_5_20251001: 64000,
    ClaudeModel.CLAUDE_OPUS_4_5_20251101: 64000,
}
