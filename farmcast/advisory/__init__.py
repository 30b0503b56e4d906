"""
Advisory engine: converts a weather snapshot into farming conditions,
crop-care recommendations and crop alerts.

Modules
-------
rules           : Rule / RuleContext + evaluate_rules() — the table evaluator.
window          : LookAheadWindow — absence-aware aggregates over days 1-2.
classifier      : classify() — current reading → FarmingConditions.
recommendations : RECOMMENDATION_RULES + recommend().
alerts          : CURRENT_ALERT_RULES, LOOK_AHEAD_ALERT_RULES + generate_alerts().
engine          : evaluate() — classify once, feed both generators.

All modules are pure functions over frozen models with no I/O.
"""
