import sys
import os
import pytest

if __name__ == "__main__":
    # Project root holds agent.py, app.py, advisor/ and tests/
    project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ""))
    if project_root not in sys.path:
        sys.path.insert(0, project_root)

    print("Project root added to sys.path:", project_root)

    tests_dir = os.path.join(project_root, "tests")
    print("Running tests from:", tests_dir)

    result = pytest.main([tests_dir])

    if result == 0:
        print("All tests passed!")
    else:
        print("Some tests failed.")
    sys.exit(result)
