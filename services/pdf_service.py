import datetime
from pathlib import Path

from reportlab.pdfgen import canvas
from reportlab.lib.pagesizes import A4

import config
from services.class_service import weekly_schedule
from services.file_manager import ensure_folder

TOP_MARGIN = 50
BOTTOM_MARGIN = 60
LINE_HEIGHT = 16


def export_schedule_pdf(save_path: Path) -> Path:
    """
    Renders the weekly class schedule as a printable PDF.

    Args:
        save_path (Path): Where to write the PDF. Parent folders are created.

    Returns:
        Path: The path that was written.
    """
    save_path = Path(save_path)
    ensure_folder(save_path.parent)
    c = canvas.Canvas(str(save_path), pagesize=A4)
    w, h = A4

    def header() -> float:
        y = h - TOP_MARGIN
        c.setFont("Helvetica-Bold", 18)
        c.setFillColorRGB(0.8, 0.0, 0.0)  # Dark Red
        c.drawString(60, y, f"{config.APP_TITLE}: WEEKLY CLASS SCHEDULE")
        c.setFillColorRGB(0, 0, 0)
        return y - 30

    y = header()
    for day, classes in weekly_schedule():
        # Start a new page if the day heading plus one row won't fit
        if y < BOTTOM_MARGIN + 2 * LINE_HEIGHT:
            c.showPage()
            y = header()

        c.setFont("Helvetica-Bold", 13)
        c.drawString(60, y, day)
        y -= LINE_HEIGHT

        c.setFont("Helvetica", 11)
        if not classes:
            c.drawString(80, y, "No classes scheduled for this day.")
            y -= LINE_HEIGHT
        for gc in classes:
            if y < BOTTOM_MARGIN:
                c.showPage()
                y = header()
                c.setFont("Helvetica", 11)
            c.drawString(80, y, f"{gc.time}   {gc.class_name} ({gc.trainer_name})   "
                                f"Enrolled: {gc.enrolled}/{gc.capacity}")
            y -= LINE_HEIGHT
        y -= LINE_HEIGHT // 2

    # --- FOOTER ---
    c.setFont("Helvetica-Oblique", 9)
    c.setFillColorRGB(0.3, 0.3, 0.3)
    c.drawString(60, 40, f"Generated: {datetime.datetime.now().strftime('%Y-%m-%d %H:%M')}")

    c.save()
    return save_path
