import logging
import sys

from pywelford.adapters.readers import FileReader
from pywelford.core.config import Config
from pywelford.core.domain.observation import parse_observations
from pywelford.core.services.rolling import rolling_mean
from pywelford.core.services.welford import mean_and_variance


logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "./configs/config.yaml"


def main(config_path: str = DEFAULT_CONFIG_PATH):
    cfg = Config(config_path)

    filename = cfg.input_filename
    if filename is None:
        raise ValueError(f"No input filename configured in {config_path}")

    with FileReader(filename) as reader:
        values = parse_observations(reader.read())
    logger.info("Read %d observations from %s", len(values), filename)

    precision = cfg.precision
    moments = mean_and_variance(values, precision)
    if moments is None:
        print(f"[{precision.to_str()}] insufficient data")
    else:
        mean, variance, sample_variance = moments
        print(f"[{precision.to_str()}] mean = {mean}")
        print(f"[{precision.to_str()}] population variance = {variance}")
        print(f"[{precision.to_str()}] sample variance = {sample_variance}")

    window = cfg.rolling_window
    if window is not None:
        means = rolling_mean(values, window)
        print(f"rolling mean (window={window}):")
        for i, m in enumerate(means):
            print(f"  {i}: {'-' if m is None else m}")


if __name__ == "__main__":
    main(sys.argv[1] if len(sys.argv) > 1 else DEFAULT_CONFIG_PATH)
