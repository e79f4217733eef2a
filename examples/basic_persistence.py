from homalg_ph.core import dualize
from homalg_ph.io import dumps, function_complex
from homalg_ph.persistence import compute_persistence_pairs, make_persistence_diagrams
from homalg_ph.reduction import StandardReduction, TwistReduction
from homalg_ph.topology import SimplicialComplex, make_boundary_matrix

print("Persistent Homology Tutorial")

# =================================
# Filled Triangle
# =================================
print("\n1. FILLED TRIANGLE")
print("Vertices {0}, {1}, {2}, then edges {0,1}, {0,2}, {1,2}, then the triangle {0,1,2}")

K = SimplicialComplex([[0], [1], [2], [0, 1], [0, 2], [1, 2], [0, 1, 2]])
M = make_boundary_matrix(K)
print("\nBoundary matrix (one line per column):")
print(dumps(M), end="")
print(f"Maximum dimension: {M.get_dimension()}")

for reduction in (StandardReduction(verbose=True), TwistReduction(verbose=True)):
    pairing = compute_persistence_pairs(M.copy(), algorithm=reduction)
    print(f"Pairs: {list(pairing)}")

print("\nDualized boundary matrix:")
print(dumps(dualize(M)), end="")
print(f"Pairs from the dual: {list(compute_persistence_pairs(M, dualize=True))}")

pairing = compute_persistence_pairs(M.copy(), algorithm='twist')
for D in make_persistence_diagrams(pairing, K):
    print(f"\nDimension {D.dimension} (Betti number {D.betti()}):")
    print(D, end="")
print("\nInterpretation:")
print("  - one component survives forever (the essential point in dimension 0)")
print("  - the last edge closes a loop that the triangle fills right away")
print("  - nothing is created in dimension 2")

# =================================
# Function Sweep
# =================================
print("\n\n2. SUBLEVEL SETS OF A 1-D FUNCTION")
values = [1.0, 3.0, 2.0, 5.0, 0.5]
print(f"Samples: {values}")
M, K = function_complex(values)
(D0,) = make_persistence_diagrams(compute_persistence_pairs(M, algorithm='twist'), K)
D0.remove_diagonal()
print("\nDimension 0 diagram without diagonal points:")
print(D0, end="")
print("\nInterpretation:")
print("  - every local minimum is born at its value and dies at the saddle that merges it")
print("  - the global minimum never dies")
