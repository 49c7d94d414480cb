import json, logging, time, uuid, datetime as dt
from typing import Optional

logger = logging.getLogger("catalog.ops")


class LogContext:
    """Collects one operation's details and emits a single record on write()."""

    def __init__(self, action: str):
        self.action = action
        self.request_id = str(uuid.uuid4())
        self.start = time.perf_counter()
        self.after = None
        self.payload = None
        self.entity_type = None
        self.entity_id = None

    def set_entity(self, etype: str, eid):
        self.entity_type = etype
        self.entity_id = str(eid)

    def set_after(self, obj): self.after = obj
    def set_payload(self, obj): self.payload = obj

    def to_record(self, result: str = "OK", err: Optional[str] = None) -> dict:
        elapsed_ms = int((time.perf_counter() - self.start) * 1000)
        return {
            "ts": dt.datetime.now(dt.timezone.utc).isoformat(),
            "action": self.action,
            "entity_type": self.entity_type,
            "entity_id": self.entity_id,
            "request_id": self.request_id,
            "after": self.after,
            "payload": self.payload,
            "result": result,
            "err_msg": err,
            "latency_ms": elapsed_ms,
        }

    def write(self, result: str = "OK", err: Optional[str] = None) -> dict:
        rec = self.to_record(result, err)
        if result == "OK":
            level = logging.INFO
        elif result == "ERROR":
            level = logging.ERROR
        else:
            level = logging.WARNING
        logger.log(level, json.dumps(rec, ensure_ascii=False, default=str))
        return rec
