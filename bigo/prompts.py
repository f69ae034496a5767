"""
Prompt templates for the AI analysis mode.
"""


SYSTEM_PROMPT = (
    "You are an expert computer scientist specializing in algorithm analysis "
    "and Big O complexity. Always output valid JSON only."
)


def build_analysis_prompt(code: str) -> str:
    """
    Build the analysis prompt for the LLM.

    Args:
        code: Source code to analyze

    Returns:
        Formatted prompt string
    """
    return f"""Analyze the time complexity of the following code and provide a detailed Big O analysis.

Code:
```
{code}
```

Return ONLY a JSON object with this exact structure:
{{
  "notation": "O(n)",
  "explanation": "Brief explanation here",
  "steps": ["Step 1", "Step 2", "Step 3"]
}}

Requirements:
- "notation" must be a valid Big O notation (e.g., O(n), O(n²), O(log n), O(n log n), O(2ⁿ), etc.)
- "explanation" should briefly explain why this complexity
- "steps" should be an array of strings explaining the analysis

Consider loop structures, recursive calls, data structure operations, divide-and-conquer patterns, and optimizations."""
