# app.py
# Entry point for the sign-up form.
# Parses settings, creates the validation model and shows the sign-up page.

import logging
import sys
from PyQt5.QtWidgets import QApplication # type: ignore
from .config import WINDOW_TITLE, configure_logging, parse_args
from .form_model import FormViewModel
from .signup_page import SignUpPage

logger = logging.getLogger(__name__)


def build_app(argv=None):
    argv = list(sys.argv if argv is None else argv)
    settings, qt_args = parse_args(argv[1:])
    configure_logging(settings.log_level)

    # Qt only sees the arguments we did not consume
    app = QApplication.instance() or QApplication(argv[:1] + qt_args)

    model = FormViewModel(settings=settings)
    page = SignUpPage(model=model)
    model.setParent(page)
    page.setWindowTitle(WINDOW_TITLE)
    page.resize(settings.width, settings.height)
    page.show()
    logger.debug("sign-up form started with %s", settings)
    return app, page


def main():
    app, page = build_app()
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
