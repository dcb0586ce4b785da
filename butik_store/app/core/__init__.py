"""Cross-cutting pieces: settings, logging set-up and domain exceptions."""
