"""Feed-forward regression network for raw price prediction."""

from torch import nn

HIDDEN_UNITS = (64, 32, 16)
DROPOUT_RATES = (0.2, 0.1)


def build_price_network(input_width: int) -> nn.Sequential:
    """
    Build the untrained price network.

    Layout: dense(64, relu) -> dropout(0.2) -> dense(32, relu) ->
    dropout(0.1) -> dense(16, relu) -> dense(1, linear).

    Dense layers use Glorot-uniform weights and zero biases.

    Args:
        input_width: Width of the encoded feature vector

    Returns:
        nn.Sequential mapping (N, input_width) to (N, 1)
    """
    network = nn.Sequential(
        nn.Linear(input_width, HIDDEN_UNITS[0]),
        nn.ReLU(),
        nn.Dropout(DROPOUT_RATES[0]),
        nn.Linear(HIDDEN_UNITS[0], HIDDEN_UNITS[1]),
        nn.ReLU(),
        nn.Dropout(DROPOUT_RATES[1]),
        nn.Linear(HIDDEN_UNITS[1], HIDDEN_UNITS[2]),
        nn.ReLU(),
        nn.Linear(HIDDEN_UNITS[2], 1),
    )

    for module in network:
        if isinstance(module, nn.Linear):
            nn.init.xavier_uniform_(module.weight)
            nn.init.zeros_(module.bias)

    return network
