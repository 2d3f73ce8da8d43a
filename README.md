# algopuzzles

A collection of classic programming puzzles and small algorithms. Each puzzle
is a plain Python function or a small class. It takes its input as arguments
and returns its answer.

## What is inside

| Module | Contents |
| --- | --- |
| `algopuzzles.textstats` | `WhitespaceCounts`, `count_whitespace`, `ascii_codes`, `read_integers`, `reverse_until` |
| `algopuzzles.fileio` | `write_and_read` (save text and read it back), `file_size` |
| `algopuzzles.basics` | `grade`, `decode_prefix` (code a=1, b=01, c=001), `is_leap_year`, `xor_swap`, `to_binary`, `series_sum`, `legendre`, `day_of_year` |
| `algopuzzles.patterns` | `star_triangle`, `pascal_triangle` |
| `algopuzzles.matrix` | `transpose`, `multiply`, `saddle_point` |
| `algopuzzles.numbertheory` | `chessboard_grains`, `gcd`, `lcm`, `is_prime`, `goldbach_pair`, `verify_goldbach`, `einstein_staircase`, `fibonacci`, `prime_factors`, `approximate_pi`, `factor_sum`, `perfect_numbers`, `amicable_pairs` |
| `algopuzzles.digits` | `reverse_digits`, `is_palindrome_number`, `is_narcissistic`, `narcissistic_numbers`, `number_to_words`, `binary_to_decimal`, `is_automorphic`, `automorphic_numbers`, `triple_palindromes` |
| `algopuzzles.theorems` | `consecutive_sums`, `two_square_sums`, `special_numbers`, `collatz_steps`, `four_squares`, `nicomachus` |
| `algopuzzles.enumeration` | `ball_combinations`, `hundred_fowls`, `reverse_multiples` (ABCD × E = DCBA), `wedding_pairs`, `liars` |
| `algopuzzles.magic` | `is_magic`, `magic_squares` (3 × 3, numbers 1 to 9) |
| `algopuzzles.matchgame` | `MatchGame`, `IllegalMove`: the 21-matches game |
| `algopuzzles.ring` | `sort_ring` (moves through the centre cell), `render_ring` |
| `algopuzzles.permutations` | `permutations` |
| `algopuzzles.recursion` | `recursive_min`, `find_false_coin`, `combinations`, `power`, `fast_power`, `hanoi` |
| `algopuzzles.riddles` | `marx_diners`, `fishermen`, `dense_ranks` |
| `algopuzzles.stacks` | `reverse_in_place`, `binary_to_octal`, `brackets_match`, `halving_product`, `add_big` |
| `algopuzzles.linkedlist` | `LinkedList` with `append`, `sort` and `merge` |
| `algopuzzles.josephus` | `josephus`: the circle where each password sets the next count |
| `algopuzzles.queues` | `is_palindrome`, `sign_triangle` |
| `algopuzzles.frequency` | `FrequencyList`: visited values move towards the front |
| `algopuzzles.bintree` | `TreeNode`, `parse_preorder` (`#` marks an empty subtree), `tree_depth`, `is_complete` |
| `algopuzzles.weights` | `can_weigh`, `broken_weights` |
| `algopuzzles.twentyfour` | `solve_24`, `solve_24_any_order` |
| `algopuzzles.knight` | `knights_tour` |
| `algopuzzles.knapsack` | `Item`, `best_value`, `best_selection` |
| `algopuzzles.queens` | `eight_queens`, `render_board` |

## Examples

```python
from algopuzzles.basics import is_leap_year, day_of_year
from algopuzzles.numbertheory import fibonacci, gcd, lcm
from algopuzzles.digits import narcissistic_numbers
from algopuzzles.recursion import hanoi

is_leap_year(2000)          # True
day_of_year(2009, 3, 6)     # 65
fibonacci(12)               # 144
gcd(12, 18), lcm(4, 6)      # (6, 12)
narcissistic_numbers()      # [153, 370, 371, 407]

hanoi(2, "A", "B", "C")     # [('A', 'B'), ('A', 'C'), ('B', 'C')]
```

Games and data structures are small classes:

```python
from algopuzzles.matchgame import MatchGame, IllegalMove
from algopuzzles.linkedlist import LinkedList

game = MatchGame()
game.take(3)                # 2: the computer's reply
game.remaining              # 16
try:
    game.take(7)
except IllegalMove:
    pass                    # a player may take only 1 to 4 matches

numbers = LinkedList([5, 1, 4])
numbers.sort()
list(numbers)               # [1, 4, 5]
```

Invalid input raises an exception that says what was wrong, most often
`ValueError`. `collatz_steps` raises `RuntimeError` when the sequence does not
reach 1 within its step limit, and `FrequencyList.visit` raises `KeyError` for
a value that is not in the list. Searches that may find nothing, such as
`saddle_point`, `goldbach_pair`, `einstein_staircase`, `fishermen` and
`knights_tour`, return `None` in that case.

## What it does not do

The package is a library only. It has no command-line program, reads nothing
from the keyboard and prints nothing; call the functions from your own code.

## Requirements

Python 3.10 or newer. The package uses only the standard library; the tests
use pytest (`pip install algopuzzles[test]`).