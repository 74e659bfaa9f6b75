import subprocess
import sys
import os

def run_test(script_path):
    print(f"Running {script_path}...")
    result = subprocess.run([sys.executable, "-m", "pytest", "-q", script_path],
                            capture_output=True, text=True)
    if result.returncode == 0:
        print(f"✓ {script_path} passed")
        return True
    else:
        print(f"✗ {script_path} failed")
        print(result.stdout)
        print(result.stderr)
        return False

def main():
    print("Running Regression Tests...")
    test_dir = os.path.join("tests", "regression")
    tests = sorted(
        os.path.join(test_dir, name)
        for name in os.listdir(test_dir)
        if name.startswith("test_") and name.endswith(".py")
    )

    passed = 0
    for test in tests:
        if run_test(test):
            passed += 1

    print(f"\nSummary: {passed}/{len(tests)} tests passed.")

    if passed == len(tests):
        sys.exit(0)
    else:
        sys.exit(1)

if __name__ == "__main__":
    main()
