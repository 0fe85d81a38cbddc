"""
Prompt #2 — Free-Text Enhancer

Rewrites a single block of text (project description, highlights, summary).
Temperature: 0.5 | Max tokens: 600
"""

SYSTEM_PROMPT = """\
You are an expert resume writer. You return only the rewritten text, never commentary."""

USER_PROMPT_TEMPLATE = """\
Enhance the following {kind} to be more impactful and keyword-optimized.
{jd_block}
Original {kind}:
{content}

Requirements:
- Improve clarity and professional tone
- Optimize for relevant keywords
- Keep it concise and impactful
- Make it ATS-friendly
{jd_requirement}
Return ONLY the enhanced version, without any explanations.
"""

JD_BLOCK_TEMPLATE = "\nTarget Job Description: {job_description}\n"
JD_REQUIREMENT = "- Incorporate relevant keywords from the job description naturally\n"
