"""
File-backed dashboards: one `dashboard{id}.json` per dashboard in a directory.

Ids are sequential integers (highest id found in the filenames + 1). Deletes remove
the file. Completion is judged on detailInfo.groupData and detailInfo.aggregatedData.
"""

import json
import logging
import re
from pathlib import Path
from typing import Any

from api.errors import DuplicateNameError, NotFoundError, StoreError, ValidationError
from api.services.dashboard_store import DashboardStatus, DashboardStore, formatted_date, has_items

logger = logging.getLogger(__name__)

# Item collections validated on update, with the label used in error messages
ITEM_COLLECTIONS = {
    "groupData": "그룹항목",
    "aggregatedData": "집계항목",
}

MSG_ID_REQUIRED = "id 값이 필요합니다."
MSG_ID_INVALID = "유효하지 않은 id 값입니다."
MSG_NAME_REQUIRED = "대시보드 이름은 필수입니다."
MSG_DUPLICATE_NAME = "이미 존재하는 대시보드 이름입니다."
MSG_FILE_NOT_FOUND = "해당 ID의 JSON 파일을 찾을 수 없습니다."
MSG_UPDATE_REQUIRED = "필수 정보값이 입력되지 않았습니다."

MAX_ID_DIGITS = 18

_DIGITS = re.compile(r"[0-9]+")


def _parse_id(dashboard_id: Any) -> int:
    if dashboard_id is None or dashboard_id == "":
        raise ValidationError(MSG_ID_REQUIRED)
    text = str(dashboard_id).strip()
    if not (text.isascii() and text.isdigit()) or len(text) > MAX_ID_DIGITS or int(text) < 1:
        raise ValidationError(MSG_ID_INVALID)
    return int(text)


def _file_id(path: Path) -> int:
    """Numeric id embedded in a filename, 0 when there is none."""
    match = _DIGITS.search(path.name)
    return int(match.group()) if match else 0


def _is_blank(value: Any) -> bool:
    return value is None or value == ""


def _sanitize_items(key: str, items: Any) -> list[dict[str, Any]]:
    """
    Drop items whose fields are all blank, reject partially filled items and
    renumber the rest from 1. The positional `id` field is not a user field.
    """
    label = ITEM_COLLECTIONS[key]
    if not isinstance(items, list):
        raise ValidationError(f"{label}은(는) 항목 목록이어야 합니다.")

    kept = []
    for item in items:
        if not isinstance(item, dict):
            raise ValidationError(f"{label}의 각 항목은 객체여야 합니다.")
        values = [v for k, v in item.items() if k != "id"]
        if all(_is_blank(v) for v in values):
            continue
        if any(_is_blank(v) for v in values):
            raise ValidationError(f"{label}에 필수 정보값이 누락되었습니다.")
        kept.append(item)

    return [{**item, "id": index} for index, item in enumerate(kept, start=1)]


def _dashboard_name(doc: Any) -> Any:
    info = doc.get("dashboardInfo") if isinstance(doc, dict) else None
    return info.get("dashboardName") if isinstance(info, dict) else None


def _summary(doc: dict[str, Any]) -> dict[str, Any] | None:
    """List row for a stored document, None when a field has an unexpected type."""
    summary = {
        "id": doc.get("id") or "",
        "dashboardName": _dashboard_name(doc) or "",
        "createdAt": doc.get("createdAt") or "",
        "updatedAt": doc.get("updatedAt") or "-",
        "status": doc.get("status") or "",
    }
    if isinstance(summary["id"], bool) or not isinstance(summary["id"], (int, str)):
        return None
    if not all(isinstance(summary[k], str) for k in ("dashboardName", "createdAt", "updatedAt", "status")):
        return None
    return summary


def _first_is_filled(items: Any) -> bool:
    return has_items(items) and isinstance(items[0], dict) and len(items[0]) > 0


def _read_json(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _dump(doc: dict[str, Any], f) -> None:
    json.dump(doc, f, ensure_ascii=False, indent=2)


class FileDashboardStore(DashboardStore):
    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def _path(self, dashboard_id: int) -> Path:
        return self.directory / f"dashboard{dashboard_id}.json"

    def _json_files(self) -> list[Path]:
        return sorted(self.directory.glob("*.json"), key=lambda p: (_file_id(p), p.name))

    def _existing_names(self, files: list[Path]) -> set[str]:
        names = set()
        for path in files:
            try:
                doc = _read_json(path)
            except (OSError, ValueError):
                logger.warning("Skipping unreadable dashboard file %s", path.name)
                continue
            name = _dashboard_name(doc)
            if isinstance(name, str) and name:
                names.add(name)
        return names

    def create(self, data: dict[str, Any] | None) -> int:
        """Write `data` verbatim plus id, createdAt and status; return the new id."""
        name = _dashboard_name(data)
        if not isinstance(name, str) or not name:
            raise ValidationError(MSG_NAME_REQUIRED)

        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            files = self._json_files()
            if name in self._existing_names(files):
                raise DuplicateNameError(MSG_DUPLICATE_NAME)

            new_id = max((_file_id(p) for p in files), default=0) + 1
            doc = dict(data)
            doc["id"] = new_id
            doc["createdAt"] = formatted_date()
            doc["status"] = DashboardStatus.CREATED
            while True:
                doc["id"] = new_id
                try:
                    # "x" fails if another writer claimed this id first
                    with open(self._path(new_id), "x", encoding="utf-8") as f:
                        _dump(doc, f)
                    break
                except FileExistsError:
                    new_id += 1
        except OSError as e:
            logger.exception("Create dashboard file failed (name=%s)", name)
            raise StoreError("파일 저장 중 오류 발생") from e
        logger.info("Dashboard file created id=%s name=%s", new_id, name)
        return new_id

    def list(self, status: str | None = None) -> list[dict[str, Any]]:
        if not self.directory.exists():
            return []
        try:
            files = self._json_files()
        except OSError as e:
            logger.exception("List dashboard files failed (dir=%s)", self.directory)
            raise StoreError("파일 목록을 가져오는 중 오류 발생") from e

        dashboards = []
        for path in files:
            try:
                doc = _read_json(path)
            except (OSError, ValueError):
                logger.exception("Skipping unreadable dashboard file %s", path.name)
                continue
            if not isinstance(doc, dict):
                logger.error("Skipping dashboard file %s: not a JSON object", path.name)
                continue
            summary = _summary(doc)
            if summary is None:
                logger.error("Skipping dashboard file %s: unexpected field types", path.name)
                continue
            if status and summary["status"] != status:
                continue
            dashboards.append(summary)
        return dashboards

    def read(self, dashboard_id: Any) -> dict[str, Any]:
        path = self._path(_parse_id(dashboard_id))
        if not path.exists():
            raise NotFoundError(MSG_FILE_NOT_FOUND)
        try:
            return _read_json(path)
        except (OSError, ValueError) as e:
            logger.exception("Read dashboard file failed (%s)", path.name)
            raise StoreError("파일을 읽는 중 오류 발생") from e

    def update(self, dashboard_id: Any, detail_info: dict[str, Any] | None = None) -> None:
        if dashboard_id is None or dashboard_id == "" or not detail_info:
            raise ValidationError(MSG_UPDATE_REQUIRED)
        if not isinstance(detail_info, dict):
            raise ValidationError(MSG_UPDATE_REQUIRED)
        path = self._path(_parse_id(dashboard_id))

        detail_info = dict(detail_info)
        for key in ITEM_COLLECTIONS:
            if key in detail_info:
                detail_info[key] = _sanitize_items(key, detail_info[key])

        if not path.exists():
            raise NotFoundError("해당 ID의 JSON 파일이 없습니다.")

        try:
            doc = _read_json(path)
            doc["detailInfo"] = detail_info
            doc["updatedAt"] = formatted_date()
            completed = _first_is_filled(detail_info.get("groupData")) and _first_is_filled(
                detail_info.get("aggregatedData")
            )
            doc["status"] = DashboardStatus.COMPLETED if completed else DashboardStatus.CREATED
            with open(path, "w", encoding="utf-8") as f:
                _dump(doc, f)
        except (OSError, ValueError, TypeError) as e:
            logger.exception("Update dashboard file failed (%s)", path.name)
            raise StoreError("파일 수정 중 오류 발생") from e
        logger.info("Dashboard file updated %s status=%s", path.name, doc["status"])

    def delete(self, dashboard_id: Any) -> None:
        path = self._path(_parse_id(dashboard_id))
        if not path.exists():
            raise NotFoundError(MSG_FILE_NOT_FOUND)
        try:
            path.unlink()
        except OSError as e:
            logger.exception("Delete dashboard file failed (%s)", path.name)
            raise StoreError("파일 삭제 중 오류 발생") from e
        logger.info("Dashboard file deleted %s", path.name)
