"""
Engine constants.

All monetary values are in plain currency units; rates are decimals per
period unless a name says otherwise (``*_PCT`` is a percentage).
"""

# ── Payoff simulation ────────────────────────────────────────────────
HORIZON_CAP = 600          # 50 years of monthly periods
PAYOFF_EPSILON = 0.01      # a balance at or below one cent counts as paid off

# ── Calendar ─────────────────────────────────────────────────────────
MONTHS_PER_YEAR = 12

# ── Schedule checks ──────────────────────────────────────────────────
SCHEDULE_TOLERANCE = 1e-6  # relative tolerance for sum(principal) vs principal

# ── Reporting ────────────────────────────────────────────────────────
TABLE_SAMPLE_EVERY = 12    # one table row per year when not showing all periods
CHART_SAMPLE_EVERY = 12
PAYOFF_CHART_SAMPLE_EVERY = 3

# ── Retirement ───────────────────────────────────────────────────────
SAFE_WITHDRAWAL_RATE = 0.04          # the "4% rule"
ON_TRACK_MONTHLY_INCOME = 3_000      # in today's dollars
CAUTION_MONTHLY_INCOME = 1_500
