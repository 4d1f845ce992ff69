import sys
import math
import random
import logging
import argparse
from decimal import Decimal, ROUND_HALF_UP, localcontext

from point import Point, InvalidDataPoint, readPoints
from mapper import assignLabels
from reducer import computeCentroids

INITIALIZED= "initialized"
ITERATING= "iterating"
CONVERGED= "converged"
EXHAUSTED= "exhausted"

defaultLogFile= "kmeans.log"
fourPlaces= Decimal("0.0000")


def generateCentroids(centroidCount, rng):
    centroidList= []
    for i in range(centroidCount):
        x= rng.random()
        y= rng.random()
        centroidList.append(Point(x, y, i))
    return centroidList


def checkStop(oldCentroids, newCentroids):
    if len(oldCentroids)!=len(newCentroids):
        return False
    for old, new in zip(oldCentroids, newCentroids):
        if old.x!=new.x or old.y!=new.y:
            return False
    return True


def formatCoordinate(value):
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    with localcontext() as ctx:
        ctx.prec= 400
        return str(Decimal(repr(value)).quantize(fourPlaces, rounding=ROUND_HALF_UP))


def formatPoint(name, index, point):
    return (f"{name} {index}: x = {formatCoordinate(point.x)}"
            f" y = {formatCoordinate(point.y)} label = {point.label}")


def printPoints(pointList):
    if len(pointList)==0:
        print("No data points")
        return
    for i, point in enumerate(pointList):
        print(formatPoint("Point", i, point))


def printMeans(centroidList):
    if len(centroidList)==0:
        print("No means assigned")
        return
    for i, centroid in enumerate(centroidList):
        print(formatPoint("Mean", i, centroid))


class KMeans:
    def __init__(self, k, rounds, rng=None):
        if k < 1:
            raise ValueError(f"k must be at least 1, got {k}")
        if rounds < 0:
            raise ValueError(f"rounds must be non-negative, got {rounds}")
        self.k= k
        self.rounds= rounds
        self.rng= rng if rng is not None else random.Random()
        self.points= []
        self.centroids= generateCentroids(k, self.rng)
        self.roundsRun= 0
        self.status= INITIALIZED
        logging.info(f"initial centroids: {self.centroids}")

    def loadData(self, dataFile):
        self.points= readPoints(dataFile)
        if self.k > len(self.points):
            logging.warning(f"k={self.k} exceeds the {len(self.points)} loaded points, "
                            f"some clusters will stay empty")

    def step(self):
        assignLabels(self.points, self.centroids)
        newCentroids= computeCentroids(self.points, self.centroids)
        self.roundsRun+= 1
        return newCentroids

    def run(self):
        self.status= ITERATING
        for i in range(self.rounds):
            newCentroids= self.step()
            logging.info(f"centroids for round {i} are: {newCentroids}")
            if checkStop(self.centroids, newCentroids):
                self.status= CONVERGED
                logging.info(f"converged after {self.roundsRun} rounds")
                return self.centroids
            self.centroids= newCentroids

        self.status= EXHAUSTED
        logging.info(f"round budget of {self.rounds} exhausted")
        return self.centroids

    def compute(self):
        centroids= self.run()
        print("Results: ")
        printMeans(centroids)
        return centroids


def execute(k, rounds, dataFile, rng=None):
    kmeans= KMeans(k, rounds, rng)
    kmeans.loadData(dataFile)
    kmeans.compute()
    return kmeans


def countArgument(minimum):
    def parse(value):
        try:
            count= int(value)
        except ValueError:
            raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}")
        if count < minimum:
            raise argparse.ArgumentTypeError(f"must be at least {minimum}, got {count}")
        return count
    return parse


def parseArgs(argv=None):
    parser= argparse.ArgumentParser(description="Cluster 2D points with Lloyd's k-means algorithm.")
    parser.add_argument("k", type=countArgument(1), help="Number of clusters")
    parser.add_argument("rounds", type=countArgument(0), help="Maximum number of rounds to run")
    parser.add_argument("data_file", help="Text file with one whitespace-separated 'x y' pair per line")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the initial centroids (random when omitted)")
    parser.add_argument("--log-file", default=defaultLogFile, help="Where to append the run log")
    parser.add_argument("--show-points", action="store_true",
                        help="Also print every data point with its final label")
    return parser.parse_args(argv)


def configureLogging(logFile):
    logging.basicConfig(
        filename=logFile,
        encoding="utf-8",
        filemode="a",
        format= "{asctime} - {levelname} - {message}",
        style= "{",
        datefmt= "%Y-%m-%d %H:%M",
        level=logging.DEBUG,
    )


def main(argv=None):
    args= parseArgs(argv)
    configureLogging(args.log_file)
    logging.info(f"k={args.k}, rounds={args.rounds}, data file: {args.data_file}, seed: {args.seed}")

    kmeans= KMeans(args.k, args.rounds, random.Random(args.seed))
    try:
        kmeans.loadData(args.data_file)
    except InvalidDataPoint as e:
        logging.error(str(e))
        print(e, file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as e:
        logging.error(f"could not read {args.data_file}: {e}")
        print("Invalid input file!", file=sys.stderr)
        print(e, file=sys.stderr)
        return 1

    kmeans.compute()
    if args.show_points:
        printPoints(kmeans.points)
    return 0


if __name__ == "__main__":
    sys.exit(main())
