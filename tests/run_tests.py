# tests/run_tests.py
#!/usr/bin/env python3
"""
Test runner for the payment instruction processor, one pytest run per suite.
Run with: python -m tests.run_tests [--suite parser] [--report]
"""

import subprocess
import time
import argparse
import os

SUITES = {
    "parser": ("Instruction Parser Tests", "tests/test_instruction_parser.py"),
    "validator": ("Transaction Validator Tests", "tests/test_transaction_validator.py"),
    "executor": ("Transaction Executor Tests", "tests/test_transaction_executor.py"),
    "classifier": ("Status Classifier Tests", "tests/test_status_classifier.py"),
    "formatter": ("Response Formatter Tests", "tests/test_response_formatter.py"),
    "api": ("Payment Instruction API Tests", "tests/test_payment_instructions.py"),
}

def run_suite(name, path):
    print(f"🧪 Running {name}...")
    return subprocess.run([
        "pytest", path, "-v",
        "--tb=short", "--color=yes"
    ], capture_output=True, text=True)

def _summary_counts(output):
    """Passed/failed counts from pytest's final summary line."""
    passed = failed = 0
    for line in reversed(output.split('\n')):
        if ' passed' in line or ' failed' in line:
            words = line.replace(',', ' ').replace('=', ' ').split()
            for count, word in zip(words, words[1:]):
                if count.isdigit() and word == 'passed':
                    passed = int(count)
                elif count.isdigit() and word == 'failed':
                    failed = int(count)
            break
    return passed, failed

def generate_test_report(results):
    report = []
    report.append("=" * 70)
    report.append("🧪 PAYMENT INSTRUCTION PROCESSOR - TEST REPORT")
    report.append("=" * 70)

    passed_tests = 0
    failed_tests = 0

    for test_suite, result in results.items():
        passed, failed = _summary_counts(result.stdout)
        passed_tests += passed
        failed_tests += failed
        report.append(f"📊 {test_suite}: {passed} passed, {failed} failed")

    total_tests = passed_tests + failed_tests
    report.append("-" * 70)
    report.append(f"📈 TOTAL: {passed_tests} passed, {failed_tests} failed, {total_tests} total")

    if total_tests > 0:
        success_rate = (passed_tests / total_tests) * 100
        report.append(f"🎯 SUCCESS RATE: {success_rate:.1f}%")

    report.append("=" * 70)
    return '\n'.join(report)

def main():
    parser = argparse.ArgumentParser(description='Run payment instruction processor tests')
    parser.add_argument('--suite', choices=['all'] + list(SUITES), default='all', help='Test suite to run')
    parser.add_argument('--report', action='store_true', help='Generate detailed test report')

    args = parser.parse_args()

    start_time = time.time()

    print("🚀 Starting payment instruction processor test suite...")
    print("📍 Test Directory:", os.path.abspath(os.path.dirname(__file__)))
    print("-" * 70)

    results = {}
    for key, (name, path) in SUITES.items():
        if args.suite in ('all', key):
            results[name] = run_suite(name, path)

    duration = time.time() - start_time

    print("-" * 70)
    print(f"⏱️  Test execution completed in {duration:.2f} seconds")

    if args.report:
        report = generate_test_report(results)
        print("\n" + report)

        report_file = "test_report.txt"
        with open(report_file, 'w') as f:
            f.write(report)
        print(f"📄 Detailed report saved to: {report_file}")

    for test_suite, result in results.items():
        if result.returncode != 0:
            print(f"\n❌ {test_suite} had failures:")
            print(result.stdout[-2000:])

    print("🎉 Test execution completed!")

if __name__ == "__main__":
    main()
