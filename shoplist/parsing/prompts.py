"""Instruction prompts sent to the text parsing service."""

SHOPPING_LIST_PROMPT = """\
Parse this shopping list into individual items WITH QUANTITIES. Return ONLY a valid JSON array of strings.
No explanations, no markdown, just the JSON array.

QUANTITY FORMATTING RULES:
- "twice X" or "2x X" -> "2x X"
- "three times X" -> "3x X"
- "four times X" -> "4x X"
- "300 grams X" or "300g X" -> "300g X"
- "half a kilo X" -> "500g X"
- "a kilo X" -> "1kg X"
- "a liter X" -> "1l X"
- "half a liter X" -> "0.5l X"
- If no quantity specified, just use item name

Input: {text}

Example output: ["2x bread", "300g chicken", "1l milk", "rolls"]"""

FRIDGE_ANALYSIS_PROMPT = """\
Analyze this photo of a fridge and provide the following:

1. Which foods do you see in the fridge? (list of items)
2. Which common staple foods might be missing for a complete stock? (max 8 suggestions)

Return ONLY a valid JSON object in this format (no markdown, no explanations):
{
    "itemsFound": ["milk", "yogurt", "ham"],
    "suggestions": ["bread", "butter", "eggs", "cheese"]
}"""


def build_shopping_list_prompt(text: str) -> str:
    """Embed raw list text into the parsing instructions."""
    return SHOPPING_LIST_PROMPT.format(text=text)
