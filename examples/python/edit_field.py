#!/usr/bin/env python3
"""
Field edit session example.

This example demonstrates:
- Connecting to the booking API
- Loading a field with its branch and field type catalogs
- Replacing the field image and saving
"""

import os
import sys

import courtdesk
from courtdesk.core.api import BranchApi, FieldApi
from courtdesk.models import ImageFile


class PrintView:
    """Minimal view that prints what the session reports."""

    def show_error(self, error, message):
        print(f"✗ {message} ({error})")

    def show_field_errors(self, errors):
        for name, message in errors.items():
            print(f"✗ {name}: {message}")

    def navigate(self, path):
        print(f"→ {path}")

    def set_busy(self, busy):
        print("…" if busy else "✓ idle")

    def reset_file_input(self):
        pass


def main(branch_id: str, field_id: str, image_path: str = None) -> int:
    api_url = os.environ.get("COURTDESK_API_URL", "http://localhost:8000/api")
    token = os.environ.get("COURTDESK_API_TOKEN", "test-token")

    with courtdesk.connect_api(api_url, token) as client:
        session = courtdesk.FieldEditSession(
            FieldApi(client), BranchApi(client), branch_id, field_id, PrintView()
        )
        if not session.load():
            return 1

        state = session.state
        print(f"Editing '{state.form.name}' in {state.branch_label}")
        print(f"Branch selector locked: {state.branch_locked}")

        if image_path:
            session.select_file(ImageFile.from_path(image_path))

        return 0 if session.submit() else 1


if __name__ == "__main__":
    if len(sys.argv) < 3:
        print("usage: edit_field.py BRANCH_ID FIELD_ID [IMAGE]")
        sys.exit(2)
    sys.exit(main(*sys.argv[1:4]))
