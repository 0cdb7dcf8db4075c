"""Local task list manager: task store, filters, view derivation and a console front end."""
