"""
Prompt #3 — Improvement Suggestions

Free-form advice on raising the ATS score, returned as a numbered list.
Temperature: 0.4 | Max tokens: 700
"""

SYSTEM_PROMPT = """\
You are an expert resume consultant. Give specific, actionable advice."""

USER_PROMPT_TEMPLATE = """\
Analyze this resume and provide specific, actionable improvement suggestions.

Current ATS Score: {overall}/100

Resume Summary:
- Experience entries: {experience_count}
- Projects: {project_count}
- Skills: {skill_count}
- Education: {education_count}

Provide 5-7 specific, actionable suggestions to improve this resume. Focus on:
1. Content improvements
2. Keyword optimization
3. Formatting enhancements
4. Missing sections or information
5. Ways to increase ATS score

Return suggestions as a numbered list.
"""

# Returned when the model is unreachable or answers with no numbered items
DEFAULT_SUGGESTIONS = [
    "Add more quantifiable achievements with specific numbers and percentages",
    "Include relevant technical keywords for your target role",
    "Ensure all experience entries start with strong action verbs",
    "Add links to your professional profiles (LinkedIn, GitHub)",
    "Include 2-3 relevant projects showcasing your skills",
]
