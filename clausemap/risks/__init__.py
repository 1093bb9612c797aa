from clausemap.risks.models import RiskRecord, Severity
from clausemap.risks.reconciler import RiskReconciler, no_risks_placeholder
from clausemap.risks.scoring import risk_level, risk_score

__all__ = ["RiskReconciler", "RiskRecord", "Severity", "no_risks_placeholder", "risk_level", "risk_score"]
