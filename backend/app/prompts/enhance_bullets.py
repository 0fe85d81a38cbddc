"""
Prompt #1 — Bullet Enhancer

Rewrites a list of resume bullets (responsibilities, achievements) one-for-one.
Temperature: 0.7 | Max tokens: 500
"""

SYSTEM_PROMPT = """\
You are an expert resume writer specializing in ATS optimization and impactful content creation."""

USER_PROMPT_TEMPLATE = """\
Enhance the following {kind} to be more impactful, professional, and ATS-friendly.
{jd_block}
Original {kind}:
{numbered_items}

Requirements:
- Start each point with a strong action verb
- Include quantifiable achievements where possible
- Keep it concise (1-2 lines per point)
- Use industry-standard terminology
- Make it ATS-friendly (avoid special characters)
{jd_requirement}
Return ONLY the enhanced points, one per line, without numbering.
"""

JD_BLOCK_TEMPLATE = "\nTarget Job Description: {job_description}\n"
JD_REQUIREMENT = "- Incorporate relevant keywords from the job description\n"
