"""Nutrition label analysis using a hosted LLM."""

import logging
from dataclasses import dataclass

from nutriscan.domain.analysis import AnalysisResult
from nutriscan.domain.llm import PromptMessage
from nutriscan.services.analysis_parser import parse_analysis
from nutriscan.services.llm import ChatCompletionClient, LlmRequestError

_logger = logging.getLogger(__name__)

ANALYSIS_SYSTEM_PROMPT = (
    "You are a nutrition expert analyzing food labels. Provide clear, "
    "accurate, and helpful nutritional information."
)

NO_ALLERGENS_NOTICE = "None explicitly listed in the label text."

_ANALYSIS_PROMPT_TEMPLATE = """\
Analyze the following nutrition label text and provide a detailed breakdown \
of the nutritional information. Format your response using the following \
exact headings, each followed by a colon and two newline characters (:\\n\\n), \
and then the information:

Key Nutrients:

[List each nutrient with its value and unit on a new line, e.g., \
"Total Fat: 10g", "Sodium: 200mg", "Vitamin C: 50mg". DO NOT include \
Calories in this list.]

Health Implications:

[List key health impacts as bullet points, one per line, starting with '- '. \
Use double asterisks (**) for terms or phrases that should be bold.]

Allergens:

[List any allergens present as bullet points, one per line, starting with \
'- '. If no allergens are explicitly listed, state "{no_allergens}"]

Overall Assessment:

[Provide a summary paragraph]

Nutrition label text:
{label_text}

Please ensure each section is clearly labeled with the exact headings \
provided and is formatted consistently as described."""


def build_analysis_prompt(extracted_text: str) -> str:
    """Build the user prompt that asks for the four analysis sections."""
    return _ANALYSIS_PROMPT_TEMPLATE.format(
        no_allergens=NO_ALLERGENS_NOTICE,
        label_text=extracted_text,
    )


@dataclass
class AnalysisService:
    """Service that requests and parses a nutrition analysis."""

    client: ChatCompletionClient
    model: str
    temperature: float = 0.7
    max_tokens: int = 1000

    async def analyze(self, extracted_text: str) -> AnalysisResult:
        """Analyze OCR text and return a freshly built result."""
        completion = await self.client.complete(
            model=self.model,
            messages=[
                PromptMessage(role="system", content=ANALYSIS_SYSTEM_PROMPT),
                PromptMessage(
                    role="user", content=build_analysis_prompt(extracted_text)
                ),
            ],
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )
        if not completion.content:
            _logger.error("Analysis response did not include message content")
            raise LlmRequestError("No analysis data received")
        return parse_analysis(completion.content, completion.citations)
