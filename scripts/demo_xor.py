"""
Demo: wire up the xor network and a deliberately broken variant.

Run: python scripts/demo_xor.py [configs/debug.yaml]
"""

import sys

from gibbons import Network, before, load_config, apply_config, setup_logging

if len(sys.argv) > 1:
    logger = apply_config(load_config(sys.argv[1]))
else:
    logger = setup_logging('gibbons')

logger.info("=" * 70)
logger.info("xor network demo")
logger.info("=" * 70)

inputs = Network.par(Network.edge(2), Network.edge(2))
cross = Network.par(Network.par(Network.edge(1), Network.swap(1, 1)), Network.edge(1))
hidden = Network.replicate(2, Network.neuron(2, 1, 'tanh'))
output = Network.neuron(2, 1, 'tanh')

for name, stage in [('inputs', inputs), ('cross', cross), ('hidden', hidden), ('output', output)]:
    logger.info(f"  {name:<7} {stage.entries} -> {stage.exits}")

nn = Network.chain(inputs, cross, hidden, output)
if nn is None:
    logger.error("xor network failed to wire")
    sys.exit(1)
logger.info(f"xor network wired: {nn}")

# Skipping the crossbar leaves 4 exits feeding a 2-entry output neuron
broken = Network.chain(inputs, output)
logger.info(f"strict composition without hidden layer: {broken}")

# The lenient combinator accepts the same pair and reports ports it cannot honour
lenient = before(inputs.graph, output.graph)
logger.warning(f"lenient composition claims {lenient.arity} anyway")
