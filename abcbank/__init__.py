"""In-memory bank accounts with clock-driven interest accrual."""
