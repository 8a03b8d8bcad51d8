"""Instruction template sent to the model.

This is the one canonical wording. The model is asked, not guaranteed, to
follow the layout rules; nothing downstream parses the report.
"""
from __future__ import annotations

from string import Template

SYSTEM_MESSAGE = (
    "You are an advanced data analysis assistant. "
    'Return ONLY a valid JSON object of the form {"summary": "<report>"}, '
    "where <report> is the complete plain text report."
)

DIMENSIONS = (
    "Management Support",
    "Autonomy",
    "Rewards",
    "Time Availability",
    "Organizational Boundaries",
)

CEAI_PROMPT_TEMPLATE = Template(
    """Your task is to analyze Corporate Entrepreneurship Assessment Instrument (CEAI) survey data from a CSV file and generate a plain text summary report formatted for business users.

CRITICAL FORMATTING RULES:
1. PLAIN TEXT ONLY: The entire report MUST be plain text. Do NOT use any Markdown syntax (no '#', '##', '*' or '**' emphasis). Do NOT use HTML tags.
2. HEADINGS & SUBHEADINGS: All headings and subheadings MUST be in ALL UPPERCASE, for example:
   CORPORATE ENTREPRENEURSHIP ASSESSMENT INSTRUMENT (CEAI) SURVEY ANALYSIS
   OVERALL RESULTS
   RELIABILITY ANALYSIS:
   DEPARTMENT BREAKDOWN:
   INTERPRETATION:
   RECOMMENDATIONS:
3. DEPARTMENT BREAKDOWN FORMAT: For each department, follow this exact pattern, with a blank line between departments:
   DEPARTMENT NAME (IN ALL UPPERCASE)
$department_lines
   Do NOT use bullet points for the dimension scores.
4. BULLET POINTS: Use textual bullets ("* Item" or "- Item") only for lists outside the department breakdown, such as under RECOMMENDATIONS or INTERPRETATION.
5. GENERAL STYLE: No code blocks. Use consistent line breaks and spacing so the report is clean and professional.

Instructions:
1. Input Data: The CSV data is:
$csv_data
2. Processing: Validate the input, compute scores, perform reliability analysis, and break down by department if applicable, following ALL formatting rules.
3. Output: Return a single plain text summary adhering to ALL the formatting rules above.

Example of the Department Breakdown section:
DEPARTMENT BREAKDOWN:

HR DEPARTMENT
Management Support Average: 3.9
Autonomy Average: 3.9
Rewards Average: 3.9
Time Availability Average: 3.7
Organizational Boundaries Average: 3.9

IT DEPARTMENT
Management Support Average: 4.3
Autonomy Average: 3.8
Rewards Average: 4.2
Time Availability Average: 3.7
Organizational Boundaries Average: 4.1
"""
)


def render_prompt(csv_data: str) -> str:
    """Embed the CSV text verbatim into the instruction template."""
    department_lines = "\n".join(f"   {d} Average: [Score]" for d in DIMENSIONS)
    return CEAI_PROMPT_TEMPLATE.substitute(department_lines=department_lines, csv_data=csv_data)
