"""
Prefect flows.

Flows:
- update: load the persisted window, trim past days, scrape a fresh
  window, merge and save

Usage (local):
    python -m forecast_window.flows.update

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    prefect deployment run 'update-window/default'

On a schedule (cron, GitHub Actions), run at most one update at a time
per output file:
    forecast-window update
"""
