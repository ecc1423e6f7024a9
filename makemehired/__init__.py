"""MakeMeHired ATS CV builder: résumé document model, payload normalization and CV generation client."""
