"""Follow-up questions about a completed analysis."""

from collections.abc import Sequence
from dataclasses import dataclass

from nutriscan.domain.analysis import AnalysisResult
from nutriscan.domain.chat import ChatMessage
from nutriscan.domain.llm import PromptMessage
from nutriscan.services.llm import ChatCompletionClient

CHAT_SYSTEM_PROMPT = (
    "You are a helpful AI assistant answering follow-up questions about a "
    "nutrition label analysis."
)
CHAT_GREETING = ChatMessage(
    text="Do you have any follow up questions? powered by perplexity",
    sender="ai",
)
EMPTY_REPLY = "No response from AI."
REQUEST_FAILED = "Failed to get AI response"


def format_analysis_context(
    extracted_text: str,
    analysis: AnalysisResult,
    history: Sequence[ChatMessage],
) -> str:
    """Serialize the label text, analysis and chat history for a prompt."""
    nutrients = ", ".join(
        f"{nutrient.name}: {nutrient.amount}"
        for nutrient in analysis.nutrients
    )
    implications = "\n".join(analysis.health_implications)
    transcript = "\n".join(
        f"{'User' if message.sender == 'user' else 'AI'}: {message.text}"
        for message in history
    )
    return (
        f"Initial Nutrition Label Text: {extracted_text}\n\n"
        "Initial Analysis:\n"
        f"Key Nutrients: {nutrients}\n"
        f"Health Implications: {implications}\n"
        f"Allergens: {', '.join(analysis.allergens)}\n"
        f"Overall Assessment: {analysis.overall_assessment}\n\n"
        f"Chat History:\n{transcript}"
    )


def build_follow_up_prompt(context: str, question: str) -> str:
    """Wrap the context and question into the follow-up prompt."""
    return (
        "Based on the following nutrition label analysis and chat history, "
        f"answer the user's follow-up question:\n\n{context}\n\n"
        f"User Question: {question}\n\nAI Response:"
    )


@dataclass
class FollowUpChatService:
    """Answers follow-up questions with the analysis as context."""

    client: ChatCompletionClient
    model: str
    temperature: float = 0.7
    max_tokens: int = 500

    async def ask(
        self,
        *,
        extracted_text: str,
        analysis: AnalysisResult,
        history: Sequence[ChatMessage],
        question: str,
    ) -> str:
        """Return the raw reply text for a follow-up question."""
        context = format_analysis_context(extracted_text, analysis, history)
        completion = await self.client.complete(
            model=self.model,
            messages=[
                PromptMessage(role="system", content=CHAT_SYSTEM_PROMPT),
                PromptMessage(
                    role="user", content=build_follow_up_prompt(context, question)
                ),
            ],
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            default_error=REQUEST_FAILED,
        )
        return completion.content or EMPTY_REPLY

