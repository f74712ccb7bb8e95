import logging

import flet as ft

from finalmark.config.settings import settings
from finalmark.controller import CalculatorController
from finalmark.ui.views.calculator_view import build_calculator_view


logger = logging.getLogger(__name__)


def main(page: ft.Page) -> None:
    page.title = "FinalMark"
    page.scroll = ft.ScrollMode.AUTO

    # one controller per page session
    controller = CalculatorController()
    controller.start()

    page.views.clear()
    page.views.append(build_calculator_view(page, controller))
    page.update()


def run() -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting FinalMark (web=%s, port=%s)", settings.web_mode, settings.port)
    ft.app(
        target=main,
        view=ft.AppView.WEB_BROWSER if settings.web_mode else ft.AppView.FLET_APP,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
