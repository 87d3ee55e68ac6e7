# nmode

Building blocks for evolving modular recurrent neural networks. The package
uses only the standard library.

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

- `nmode.geometry`: `P3D` is a three-dimensional point. It supports `+` with
  another point or a number, `-`, `*` by a number or by another point (which
  gives the cross product), `/` by a number, and `==` within 1e-6 on each
  coordinate. It also has `cross`, `dot`, `length`, `normalised`, `inverted`,
  `distance`, the Euler-angle rotations `rotated` and `rotated_inverse`, and
  `rotated_by` for rotation by a quaternion. `Quaternion` (identity by
  default) offers `from_euler`, multiplication, negation, `conjugate`,
  `inverse` and `to_euler`.
- `nmode.random_source`: one shared generator. `initialise(seed)` seeds it.
  Without a seed it uses the current time and prints ten sample values.
  `unit()` returns a number in [0, 1) and `rand(minimum, maximum)` a number in
  [minimum, maximum). `randi(minimum, maximum)` returns an integer rounded
  from a uniform draw.
- `nmode.tokeniser`: `tokenise(text, delimiters)` splits at every delimiter
  character and keeps empty tokens. An empty text gives an empty list.
- `nmode.version`: `Version`, an ordered, frozen `major.minor.patch` triple.
  `Version.parse("1.2.3")` reads one, and `str()` writes it back.
- `nmode.changelog`: `ChangeLog` keeps `ChangeLogEntry` items sorted by
  version. `version()` gives the newest version and `last_crucial_change()`
  the newest crucial one. `changes(since)` lists every entry newer than
  `since`, one line each.
- `nmode.parsing`: `ParseElement`, an opening or closing tag (`ElementKind`)
  with its `ParseAttribute` list. It provides `opening`, `closing`,
  `attribute` and `has_attribute`, and typed look-ups with defaults:
  `get_str`, `get_float`, `get_int`, `get_bool`.
- `nmode.errors`: `NMODEError`, and `ErrorHandler`, which gathers a message
  piece by piece with `write`. Its `push` raises the gathered text as
  `NMODEError`. `ErrorHandler.instance()` returns a shared handler.
- `nmode.simulator`: `Simulator`, the simulator settings. They are working
  directory, experiment, path, options, environment and number of simulators.
  The settings are filled from a `simulator` `ParseElement`. `override_cpus`
  takes precedence over the configured `nr()`.
- `nmode.node`: `Node`, a network-module node with type, label, position,
  transfer function, bias and incoming edges. It can be filled from parse
  elements. `set_type` rejects unknown types with `NMODEError`. Other methods
  are `contains`, `add_edge`, `remove_edge`, `remove_edge_from`, `copy`
  (without edges), `equal` (every property), `==` (position, label, type and
  transfer function) and `to_xml`.
- `nmode.rnn`: `Neuron`, `Synapse`, `TransferFunction` (tanh, sigmoid,
  identity) and `RNN`. An `RNN` update computes all activities from the
  previous outputs, then all outputs.
- `nmode.stats`: `Stats`, which holds best, average and spread of fitness,
  hidden units and edges. Build it with `from_values` or
  `from_individuals`. The individuals are expected best first, each exposing
  `fitness` and `modules` with `hidden_nodes` and `edges`.
- `nmode.xsd`: `XsdAttribute`, `XsdElement` and `XsdChoice`, with
  occurrence bounds, for describing a configuration schema.

## Example

```python
from nmode.rnn import RNN, Neuron, Synapse, TransferFunction

sensor = Neuron(transferfunction=TransferFunction.ID)
motor = Neuron(transferfunction=TransferFunction.TANH)
motor.add_synapse(Synapse(source=sensor, weight=0.5))

net = RNN()
net.add_input_neuron(sensor)
net.add_output_neuron(motor)

net.set_inputs([1.0])
net.update()  # the sensor output becomes 1.0
net.update()  # the signal reaches the motor neuron
print(net.outputs())  # [tanh(0.5)]
```

## What the package does not do

The package is a set of building blocks and has no command. It provides none
of the following:

- an XML reader or writer for whole configurations;
- modules, individuals or populations;
- mutation, reproduction or selection;
- a connection to a simulator;
- log or plot output.

`Simulator` only holds settings, and `Stats.from_individuals` works on
whatever objects the caller supplies.