from prometheus_client import Counter

# Exposed on /metrics through the app mounted in src/main.py
ANALYSES_TOTAL = Counter(
    "clinic_rules_analyses_total",
    "Rule engine runs, by engine",
    ["engine"],
)

FINDINGS_TOTAL = Counter(
    "clinic_rules_findings_total",
    "Findings returned to clients, by engine",
    ["engine"],
)

def record_run(engine: str, findings: int):
    ANALYSES_TOTAL.labels(engine=engine).inc()
    FINDINGS_TOTAL.labels(engine=engine).inc(findings)
