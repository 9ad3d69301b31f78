"""MedSchoolRPG: a text-driven medical school role-play."""
