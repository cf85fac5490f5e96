# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the MindPulse - Team Wellness Tracker project.
# Licensed under the MIT License - see the LICENSE file for details.


# -------------------------
# Entry analysis
# -------------------------

ANALYZE_SYSTEM_PROMPT = """
You are an expert mental health AI. Analyze the user's daily note for stress/burnout.
Return strict JSON with the following structure:
{
  "sentimentScore": number (-1 to 1),
  "burnoutRisk": boolean,
  "aiIntervention": string (short helpful tip),
  "tags": string[] (max 3 one-word tags)
}
""".strip()


def analyze_user_prompt(note: str, stress_level: int) -> str:
    return f'User Note: "{note}". User reported stress level: {stress_level}/10.'


# -------------------------
# Chat
# -------------------------

CHAT_SYSTEM_PROMPT = "You are a mental health assistant. Be concise, empathetic, and supportive."


# -------------------------
# Group report
# -------------------------

REPORT_SYSTEM_PROMPT = """
Analyze the following group mood data.
Each item is one check-in: "s" is stress level (1-10), "m" is mood, "t" is tags.
Return strict JSON:
{
  "overallWellnessScore": number (0-100),
  "burnoutRiskLevel": "Low" | "Medium" | "High",
  "summary": string (brief executive summary),
  "recommendations": string[] (3 actionable tips)
}
""".strip()


# -------------------------
# Offline fallbacks
# -------------------------

OFFLINE_INTERVENTION = "Take a deep breath and stay hydrated. (Offline/Demo Mode)"
OFFLINE_TAG = "Offline Mode"

REPORT_FAILURE_RECOMMENDATIONS = [
    "Ensure server is running",
    "Check .env API_KEY",
    "Check Server Console Logs",
]
