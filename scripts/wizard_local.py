#!/usr/bin/env python3
"""
Interactive local wizard harness (no HTTP, no Formspree).

Usage:
  python3 scripts/wizard_local.py

What it does:
- Creates one wizard session wired to the mock intake
- Lets you drive it with short commands
- Prints the rendered view after every command
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from enrollment.application.use_cases.pricing import PricingResolver
from enrollment.application.use_cases.submit_application import SubmitApplicationUseCase
from enrollment.application.use_cases.wizard import WizardStateMachine
from enrollment.application.use_cases.wizard_view import WizardView, WizardViewBuilder
from enrollment.infrastructure.catalog.catalog_store import StaticCatalogStore
from enrollment.infrastructure.intake.mock_intake import MockIntake
from enrollment.infrastructure.store.memory_store import MemorySessionStore

HELP = """Commands:
  cat <id>            choose a course type (main, conv, placement, trial)
  pkg <id>            choose a package
  next | back | reset navigate
  cur <code>          switch currency (USD, KWD)
  set <field> <value> full_name, email, phone, country, preferred_date, preferred_time
  submit              send the application to the mock intake
  /quit, /help"""


def _print_view(view: WizardView) -> None:
    print("-" * 60)
    print(f"[{view.step.value}] {view.step_label}  currency={view.currency}")
    if view.category:
        print(f"course:  {view.category.title} ({view.category.subtitle})")
        if view.bundle is None:
            for b in view.category.bundles:
                print(f"  - {b.id:<5} {b.title:<20} {b.lessons_label:<11} {b.display_total:<9} {b.display_per_unit}")
    if view.bundle:
        print(f"package: {view.bundle.title}, {view.bundle.lessons_label}, {view.bundle.display_total}")
    print(f"fields:  {view.fields}")
    print(f"needs_schedule={view.needs_schedule} ready={view.ready_to_submit} in_flight={view.in_flight}")
    if view.result.message:
        print(f"result:  {view.result.status.value}: {view.result.message}")


def main() -> None:
    catalog = StaticCatalogStore()
    pricing = PricingResolver(catalog)
    wizard = WizardStateMachine(catalog)
    views = WizardViewBuilder(catalog, pricing, wizard)
    intake = MockIntake()
    submit = SubmitApplicationUseCase(wizard=wizard, pricing=pricing, delivery=intake)
    session = MemorySessionStore().create()

    print("\nLocal Wizard Harness")
    print(HELP)
    print("Courses: " + ", ".join(c.id for c in catalog.categories_in_order()))
    _print_view(views.build(session))

    while True:
        try:
            line = input("\n> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not line:
            continue
        cmd, _, rest = line.partition(" ")

        if cmd == "/quit":
            break
        if cmd == "/help":
            print(HELP)
            continue

        result = None
        if cmd == "cat":
            result = wizard.select_category(session, rest.strip())
        elif cmd == "pkg":
            result = wizard.select_bundle(session, rest.strip())
        elif cmd == "next":
            result = wizard.proceed(session)
        elif cmd == "back":
            result = wizard.back(session)
        elif cmd == "reset":
            result = wizard.reset(session)
        elif cmd == "cur":
            wizard.set_currency(session, rest.strip().upper())
        elif cmd == "set":
            field, _, value = rest.partition(" ")
            try:
                wizard.update_fields(session, **{field: value})
            except ValueError as e:
                print(f"error: {e}")
                continue
        elif cmd == "submit":
            if not wizard.is_ready_to_submit(session):
                print("not ready: fill in the required fields first")
                continue
            asyncio.run(submit.submit(session))
            if intake.delivered:
                print(f"payload: {intake.delivered[-1].to_wire()}")
        else:
            print("unknown command, /help for the list")
            continue

        if result is not None and not result.accepted:
            print(f"refused: {result.guard_reason}")
        _print_view(views.build(session))


if __name__ == "__main__":
    main()
