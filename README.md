# estudos

A small collection of algorithm exercises. Each one is a Python module, and
most come with a command-line entry point:

- `estudos.digraph` – a directed graph (`DiGraph`) whose vertices have labels
  and partitions. Vertices and edges are kept in stack order, so the most
  recently added comes first.
- `estudos.metabolic` – reads a metabolic network and runs a Dijkstra variant.
  For each metabolite it finds the cheapest set of reactions that produces it,
  with cost counted in enzymes, and reports those minimal reactions.
- `estudos.graph` – an undirected graph (`Graph`). Each edge has a weight equal
  to the sum of its endpoints' degrees. The graph can build induced subgraphs.
- `estudos.graph_cli` – reads a graph from standard input and prints it. It can
  also read a vertex set and print the subgraph it induces.
- `estudos.dictionary` – a trie dictionary (`Trie`) searched by Levenshtein
  distance.
- `estudos.knapsack` – an exhaustive 0/1 knapsack over randomly generated gifts.

## Installation

```
pip install .
```

To install and run the test suite:

```
pip install .[test]
pytest
```

## Commands

### `estudos-metabolic`

Analyses a metabolic network. The initial substrates are read from standard
input; the marker `FIM` is skipped.

```
estudos-metabolic network.met < substrates.in
```

Each line of the network file describes one reaction, for example
`R1 M1 + M2 => M3 _E1`. The tokens are read by their first character:

- `R` marks a reaction.
- `M` marks a metabolite.
- `_` marks an enzyme.
- `=` separates substrates from products.

The command prints the network as an edge list, then a blank line. After that
it prints one line per produced metabolite, listing the reactions it needs.

### `estudos-graph`

Reads a graph from standard input and prints it. The input is the vertex count
followed by `u v` pairs, ending with `0 0`:

```
estudos-graph < graph.in
```

Options:

- `--weights` prints each edge's weight.
- `--subgraph` then reads vertex ids up to a `0` and prints the subgraph they
  induce.

### `estudos-dictionary`

Loads a dictionary and prints its words in alphabetical order. It then answers
the queries in `consultas.txt` in the current directory. Each query is a word
followed by a maximum edit distance.

```
estudos-dictionary words.txt
```

Each answer is printed as `word:match1,match2`, with at most 20 matches.

### `estudos-knapsack`

Reads a gift count and a sack capacity from standard input and generates
random gifts. It then prints the most valuable choice that fits within the
capacity, along with the time taken.

```
estudos-knapsack --seed 42
```

## Library use

```python
from estudos.dictionary import Trie, edit_distance

trie = Trie()
trie.insert("casa")
trie.insert("caso")
print(trie.search("cas", 1))
print(edit_distance("kitten", "sitting"))
```

```python
from estudos.knapsack import best_selection

selection = best_selection([10, 4, 7], [5, 3, 4], 8)
print(selection.chosen, selection.value, selection.weight)
```

```python
from estudos.graph import Graph

graph = Graph()
for vertex_id in (1, 2, 3):
    graph.add_vertex(vertex_id)
graph.add_edge(1, 1, 2)
graph.add_edge(2, 2, 3)
print(graph.induced_subgraph([1, 2]).format(weights=True))
```

## What this package does not do

The package has no concurrency exercises. It provides no barrier, no FIFO
resource queue and no multi-process worker simulation.