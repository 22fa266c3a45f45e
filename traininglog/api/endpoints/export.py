"""
CSV export endpoint.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from traininglog.api.dependencies import get_export_service
from traininglog.services.export_service import EXPORT_FILENAME, ExportService, iter_csv

router = APIRouter()


@router.get("/export.csv", summary="Download every workout item as CSV.")
def export_csv(service: ExportService = Depends(get_export_service)):
    rows = service.rows()
    return StreamingResponse(iter_csv(rows), media_type="text/csv; charset=utf-8",
                             headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'}, )
