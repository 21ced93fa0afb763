# eulersolve

Small, self-contained solvers for classic number-theory and combinatorics puzzles. They cover prime sieves, digit manipulations, permutations, divisor functions, tilings, recurrences and path sums over grids.

Each solver is a plain function. It takes its bounds and inputs as arguments and returns its answer. Nothing is printed. Invalid arguments raise `ValueError`. Searches that find nothing return `None`.

The package uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `eulersolve.sieve`: `prime_sieve`, `prime_sum`, `nth_prime`, `largest_prime_factor`
- `eulersolve.prime_puzzles`:
  - circular primes (`circular_primes`), truncatable primes (`truncatable_primes_sum`), the largest pandigital prime (`largest_pandigital_prime`)
  - Goldbach's other conjecture (`goldbach_counterexample`), runs of numbers with distinct prime factors (`distinct_prime_factors_run`), prime permutations (`prime_permutations`)
  - consecutive prime sums (`consecutive_prime_sum`), quadratic primes (`quadratic_primes`), prime cube partnership (`prime_cube_partnership`)
  - spiral primes (`spiral_primes`), prime power triples (`prime_power_triples`), prime summations (`prime_summations`)
  - prime pair sets (`prime_pair_sets`), `largest_divisible` and `two_prime_divisible_sum`
- `eulersolve.digits`:
  - digit sums of large numbers: `power_digit_sum`, `factorial_digit_sum`, `max_power_digit_sum`
  - `first_fibonacci_with_digits`, `large_sum_prefix`, `largest_series_product`
  - digit-power and digit-factorial numbers: `digit_power_numbers_sum`, `digit_factorials_total`
  - digit chains: `square_digit_chains`, `digit_factorial_chains`
  - `champernowne_product`
- `eulersolve.permutations`:
  - lexicographic permutations: `next_permutation`, `nth_permutation`
  - substring divisibility: `substring_divisibility_sum`
  - pandigital products and multiples: `pandigital_products`, `max_pandigital_multiple`
  - `permuted_multiples`
  - palindromes: `is_palindrome`, `double_base_palindromes`, `largest_palindrome_product`
  - Lychrel numbers: `lychrel_count`
- `eulersolve.series`:
  - closed-form sums: `multiples_sum`, `sum_square_difference`, `spiral_diagonal_sum`
  - `fibonacci`, `even_fibonacci_sum`, `smallest_multiple`, `pythagorean_triplet_product`, `lattice_paths`
  - powers: `distinct_powers`, `self_powers_sum`, `large_non_mersenne_prime`, `powerful_digit_counts`
  - `square_root_convergents`
- `eulersolve.divisors`:
  - `count_divisors`, `highly_divisible_triangle`
  - Collatz chains: `collatz_length`, `longest_collatz`
  - amicable and abundant numbers: `proper_divisor_sum`, `amicable_sum`, `abundance`, `non_abundant_sum`
  - reciprocal cycles: `cycle_length`, `longest_reciprocal_cycle`
  - binomial coefficients: `choose`, `combinatoric_selections`
- `eulersolve.counting`:
  - `letter_count` for numbers written in British English
  - calendar: `month_days`, `count_sundays`
  - `coin_sums`
  - digit-cancelling fractions: `is_digit_cancelling`, `digit_cancelling_fractions`
  - `max_right_triangles`
  - polygonal numbers: `pentagonal`, `is_pentagonal`, `min_pentagon_difference`, `triangle_pentagonal_hexagonal`
- `eulersolve.totients`: `phi`, `totient_maximum`, `ordered_fraction_numerator`, `counting_fractions`, `fractions_in_range`, `resilience`, `diophantine_reciprocals`
- `eulersolve.tilings`: `count_summations`, `coin_partitions`, `block_combinations`, `block_combinations_threshold`, `coloured_tiles`, `mixed_tiles`, `dice_totals`, `dice_game`
- `eulersolve.recurrences`: `arranged_probability`, `golden_nugget`, `special_isosceles_triangles`, `modified_golden_nuggets`, `square_remainders`, `pythagorean_tiles`, `singular_right_triangles`, `same_differences`, `counting_rectangles`
- `eulersolve.searches`:
  - bouncy numbers: `is_bouncy`, `bouncy_threshold`
  - `perfect_square_collection`
  - reversible numbers: `is_reversible`, `count_reversible`
  - `factorial_trailing_digits`, `squarefree_binomial_sum`
  - concealed squares: `is_concealed_square`, `concealed_square`
  - `idempotents`
  - square-root digits: `square_root_digit_sum`, `square_root_digital_expansion`
- `eulersolve.grids`:
  - readers: `read_lines`, `read_triangle`, `read_matrix`
  - path sums: `max_triangle_path`, `min_path_two_ways`, `min_path_three_ways`, `min_path_four_ways`
- `eulersolve.datafiles`:
  - word scores: `word_score`, `name_scores`, `read_quoted_words`, `coded_triangle_words`
  - `read_int_rows`
  - `largest_exponential`
  - triangle containment: `triangle_contains_origin`, `triangle_containment`
  - `minimal_network_savings`
  - `derive_passcode`

## Examples

```python
from eulersolve.sieve import prime_sum, nth_prime
from eulersolve.series import multiples_sum, lattice_paths
from eulersolve.grids import max_triangle_path

multiples_sum(3, 5, 1000)        # 233168
prime_sum(10)                    # 17
nth_prime(6)                     # 13
lattice_paths(20)                # 137846528820
max_triangle_path([[3], [7, 4], [2, 4, 6], [8, 5, 9, 3]])  # 23
```

Some solvers return a small named tuple instead of a bare number. For example, `divisors.longest_collatz` returns a `CollatzRecord(start, length)`. `prime_puzzles.quadratic_primes` returns a `QuadraticPrimes(a, b, length)` with a `product` property.

Puzzles that need input data take the parsed data as arguments. The readers in `eulersolve.grids` and `eulersolve.datafiles` load that data from a file path first:

```python
from eulersolve.grids import read_matrix, min_path_two_ways
from eulersolve.datafiles import read_quoted_words, name_scores

matrix = read_matrix("matrix.txt")
print(min_path_two_ways(matrix))

names = read_quoted_words("names.txt")
print(name_scores(names))
```

## What it does not do

- There is no command-line program. Call the functions from Python.
- Data files are not bundled. Supply your own and read them with the functions above.