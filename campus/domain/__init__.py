"""Pure domain helpers (ids, seed data, time slots). No I/O here."""
