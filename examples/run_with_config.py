from pathlib import Path

from trade_timeline.config import freeze_config, load_config, verify_config_lock
from trade_timeline.monitoring import AuditLog, LogNotifier, Monitor
from trade_timeline.runtime import build_dashboard, create_run_context


config_path = Path("configs") / "dashboard_v1.yaml"
config = load_config(config_path)
lock_path = freeze_config(config_path)
assert verify_config_lock(config_path, lock_path)

context = create_run_context(config.run_id_prefix, seed=7, config_path=config_path)

monitor = Monitor(LogNotifier(prefix=config.monitoring.notify_prefix))
audit = AuditLog(
    Path(config.monitoring.audit_log_path or "runtime/dashboard_audit.log"),
    run_id=context.run_id,
    seed=context.seed,
    config_hash=context.config_hash,
)
audit.log("run_start", {"config": str(config_path), "lock": str(lock_path)})

datasets = build_dashboard(config, seed=context.seed, audit=audit, monitor=monitor)

print("Run ready:", context.run_id, "pairs:", [dataset.pair for dataset in datasets])
