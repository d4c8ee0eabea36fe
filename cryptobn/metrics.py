# cryptobn/metrics.py
"""
Prometheus counters for the generation loops. Counts only; the numbers
themselves are never recorded.
"""
from prometheus_client import Counter

PRIME_CANDIDATES = Counter("cryptobn_prime_candidates_total", "Prime candidates tested", ["kind"])
PRIMES_GENERATED = Counter("cryptobn_primes_generated_total", "Primes generated", ["kind"])
SAMPLING_REJECTIONS = Counter("cryptobn_sampling_rejections_total", "Random-below draws rejected as out of range")
