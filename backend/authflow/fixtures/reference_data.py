"""Reference data: valid, invalid and edge-case form values for auth tests.

Phones use the local subscriber convention (no country code) unless a list
says otherwise. Passwords under INVALID fail at least one policy rule.
"""

# ──────────────────────────────────────────────────────────────────────
# VALID VALUES
# ──────────────────────────────────────────────────────────────────────

VALID: dict[str, list[str]] = {
    "emails": [
        "user1@example.com",
        "user2@test.com",
        "user3@domain.co.uk",
    ],
    "phones": [
        "501234567",
        "501234568",
        "501234569",
    ],
    "international_phones": [
        "+966501234567",
        "+966501234568",
        "+966501234569",
    ],
    "passwords": [
        "Password123!",
        "TestPass456@",
        "MyPass789#",
    ],
}


# ──────────────────────────────────────────────────────────────────────
# INVALID VALUES (negative cases)
# ──────────────────────────────────────────────────────────────────────

INVALID: dict[str, list[str]] = {
    "emails": [
        "invalid-email",
        "@example.com",
        "user@",
        "user@.com",
        "user@domain",
        "",
        "user space@example.com",
    ],
    "phones": [
        "50123456",            # too short
        "5012345678",          # too long
        "abc123456",           # letters
        "",
        "501-234-567",         # dashes
        "+966501234567",       # country code not stripped
        "966501234567",
    ],
    "passwords": [
        "12345678",            # no letters, no special, too short
        "password",            # no numbers, no special, too short
        "Pass123",             # too short, no special
        "Password",            # no numbers, no special
        "123456789",           # no letters, no special
        "Password!",           # no numbers
        "Password123",         # no special
        "",
        "Pass1!",              # too short
    ],
}


# ──────────────────────────────────────────────────────────────────────
# EDGE CASES
# ──────────────────────────────────────────────────────────────────────

EDGE_CASES: dict[str, dict[str, bool]] = {
    # value -> accepted by the engine
    "emails": {
        "a@b.co": True,
        "user+tag@example.com": True,
        "user.name@example.com": True,
        "user123@subdomain.example.com": True,
        "user@domain..com": True,  # permissive shape check
    },
    "passwords": {
        "Test123!": False,          # one short of the minimum
        "A1!bcdefg": True,          # exactly the minimum
        "123456789!": False,        # no letters
        "Abcdefgh!": False,         # no numbers
        "Password123456789!": True,  # no maximum length
    },
}


# ──────────────────────────────────────────────────────────────────────
# EXISTING ACCOUNT (duplicate registration, sign-in)
# ──────────────────────────────────────────────────────────────────────

EXISTING_USER: dict[str, str] = {
    "email": "existing@example.com",
    "phone": "501234500",
    "password": "ExistingPass123!",
}
