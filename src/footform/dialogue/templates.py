"""Reply templates — every user-facing text the dialogue sends.

Tone: friendly clinician assistant walking a colleague through a measurement form.
"""

TEMPLATES = {
    "prompt": "{label}?",
    "reset": (
        "Session reset ✅\n"
        "Let’s start again.\n\n"
        "{prompt}"
    ),
    "start": (
        "Okay, we’ll go through the Parametric Foot form together 👣\n\n"
        "You can type:\n"
        '- "wrong on N" to correct a value\n'
        '- "N: 123" to directly set N\n'
        '- "summary" any time to see what you have so far\n'
        '- "reset" to start over\n\n'
        "{prompt}"
    ),
    "summary": "Current answers:\n\n{summary}",
    "correction_applied": (
        "Updated {label} to: {value} ✅\n\n"
        'Type "summary" to review everything, or continue answering the next question.'
    ),
    "direct_set": "Set {label} to: {value} ✅",
    "correction_requested": (
        "No problem 👌\n"
        "What should **{label}** be now?"
    ),
    "all_fields_completed": (
        "All fields completed ✅\n\n"
        "Here is your full set:\n\n"
        "{summary}"
    ),
    "sequence_completed": (
        "Thanks, all fields are now completed ✅\n\n"
        "Here is your full set:\n\n"
        "{summary}\n\n"
        'You can type "N: 123" (for example) to correct, or "reset" to start a new patient.'
    ),
    "already_completed": (
        "All questions are already answered ✅\n"
        'Type "summary" to see them, or "reset" to start again.'
    ),
}


def render(name: str, **kwargs) -> str:
    """Render a named template with the given fields."""
    return TEMPLATES[name].format(**kwargs)
