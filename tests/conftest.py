import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--save-to-json",
        action="store",
        nargs="?",
        const="signatures_json",
        help="Save the generated signature vectors to JSON files in the specified directory",
    )


@pytest.fixture
def save_to_json_folder(request):
    return request.config.getoption("--save-to-json")
