"""Fixed prompt templates. Each one pins the JSON schema the model must return."""

IMAGE_PROMPT = """You are given an image. Respond ONLY with a single valid JSON object (no code fences, no explanation).
Schema:
{
  "title": "<a concise image title, 3-7 words>",
  "description": "<a one-paragraph description, 2-4 sentences>"
}
Return only the JSON object."""

CHUNK_SUMMARY_PROMPT = """You are given an excerpt of text from a PDF. Respond ONLY with a single valid JSON object (no code fences, no explanation).
Schema:
{
  "summary": "<a concise summary of the excerpt, 3-6 sentences>"
}
Return only the JSON object."""

COMBINE_PROMPT = """You are given several short summaries. Combine them into ONE concise JSON object (no code fences, no explanation) that preserves the core ideas.
Schema:
{
  "summary": "<a single consolidated summary, 4-8 sentences>"
}
Return only the JSON object."""
