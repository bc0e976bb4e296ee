'''
Revenue Leak Calculator Backend Test Suite

Test Modules:
-------------
- test_leakage.py: Leak categories, response time tiers, recovery scenarios
- test_lead_scoring.py: ARR / leak / industry tiers, cap, preliminary score
- test_validation.py: Realism bounds, clamped values, warning order, confidence
- test_submission_mapper.py: Record mapping, rounding, zero-ARR guard
- test_industry_benchmarks.py: Prefill defaults, targets, benchmark hints
- test_pipeline.py: End-to-end evaluation of one submission
- test_batch_scoring.py: CSV parsing and rescoring with pandas
- test_api.py: FastAPI endpoints via TestClient

Running Tests:
--------------
    pytest backend/tests/ -v
    pytest backend/tests/ -m "not slow"
'''
