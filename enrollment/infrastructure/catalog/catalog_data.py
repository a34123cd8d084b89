from __future__ import annotations

from enrollment.domain.entities.catalog import BundleDefinition, CategoryDefinition, CurrencyDefinition

CURRENCIES: list[CurrencyDefinition] = [
    CurrencyDefinition(code="USD", symbol="$", symbol_prefixed=True),
    CurrencyDefinition(code="KWD", symbol="KWD", symbol_prefixed=False),
]

# Step 1 cards, in display order
CATEGORIES: list[CategoryDefinition] = [
    CategoryDefinition(
        id="main",
        title="Main Course",
        subtitle="50–60 minutes per lesson",
        description="Structured lessons covering grammar, vocabulary, reading, listening, and guided speaking.",
    ),
    CategoryDefinition(
        id="conv",
        title="Conversational",
        subtitle="30–40 minutes per lesson",
        description="Speaking-focused sessions to improve fluency, confidence, and natural expression.",
    ),
    CategoryDefinition(
        id="placement",
        title="Placement Test",
        subtitle="30 minutes, one session",
        description="A short assessment with a teacher to find your level before choosing a course.",
    ),
    CategoryDefinition(
        id="trial",
        title="Free Trial",
        subtitle="20–30 minutes, one session",
        description="Meet a teacher, try a lesson and ask questions before committing to a package.",
    ),
]

# Bundles are indexed by their owning category id
BUNDLES: dict[str, list[BundleDefinition]] = {
    "main": [
        BundleDefinition(
            id="m1",
            title="Quick Start",
            unit_count=1,
            price_by_currency={"USD": 15, "KWD": 5},
            per_unit_label_by_currency={"USD": "$15 per lesson"},
        ),
        BundleDefinition(
            id="m10",
            title="Starter Pack",
            unit_count=10,
            price_by_currency={"USD": 140, "KWD": 43},
            per_unit_label_by_currency={"USD": "$14 per lesson"},
        ),
        BundleDefinition(
            id="m20",
            title="Momentum Month",
            unit_count=20,
            price_by_currency={"USD": 260, "KWD": 80},
            per_unit_label_by_currency={"USD": "$13 per lesson", "KWD": "4 KWD per lesson"},
        ),
        BundleDefinition(
            id="m40",
            title="Consistency Plan",
            unit_count=40,
            price_by_currency={"USD": 480, "KWD": 148},
            per_unit_label_by_currency={"USD": "$12 per lesson"},
        ),
        BundleDefinition(
            id="m80",
            title="Full Level Journey",
            unit_count=80,
            price_by_currency={"USD": 880, "KWD": 270},
            per_unit_label_by_currency={"USD": "$11 per lesson"},
        ),
    ],
    "conv": [
        BundleDefinition(
            id="c1",
            title="Warm-Up Chat",
            unit_count=1,
            price_by_currency={"USD": 10, "KWD": 3},
            per_unit_label_by_currency={"USD": "$10 per lesson"},
        ),
        BundleDefinition(
            id="c10",
            title="Fluency Starter",
            unit_count=10,
            price_by_currency={"USD": 90, "KWD": 28},
            per_unit_label_by_currency={"USD": "$9 per lesson"},
        ),
        BundleDefinition(
            id="c20",
            title="Talk-a-Lot Plan",
            unit_count=20,
            price_by_currency={"USD": 160, "KWD": 49},
            per_unit_label_by_currency={"USD": "$8 per lesson"},
        ),
        BundleDefinition(
            id="c40",
            title="Conversation Pro",
            unit_count=40,
            price_by_currency={"USD": 280, "KWD": 86},
            per_unit_label_by_currency={"USD": "$7 per lesson"},
        ),
    ],
    "placement": [
        BundleDefinition(
            id="p1",
            title="Level Check",
            unit_count=1,
            price_by_currency={"USD": 10, "KWD": 3},
        ),
    ],
    "trial": [
        BundleDefinition(
            id="t1",
            title="Trial Lesson",
            unit_count=1,
            price_by_currency={"USD": 0, "KWD": 0},
            per_unit_label_by_currency={"USD": "Free trial lesson", "KWD": "Free trial lesson"},
        ),
    ],
}
