# sql_guard.py
"""
Verb-prefix guard for incoming statements.

Only the leading keyword is compared (case-insensitive, after trimming).
The SQL itself is not parsed, so a statement that starts with the allowed
verb but reaches further through e.g. a stored routine call is not caught
here. Anything stricter would change which statements are accepted.
"""


def check(raw_statement: str, allowed_verb: str) -> bool:
    if not raw_statement or not raw_statement.strip():
        return False
    return raw_statement.strip().upper().startswith(allowed_verb.upper())


def rejection_reason(allowed_verb: str) -> str:
    return f"{allowed_verb.upper()} 문만 허용됩니다."
