import math
import logging

UNASSIGNED= -1


class Point:
    def __init__(self, x, y, label=UNASSIGNED):
        self.x= x
        self.y= y
        self.label= label

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.x==other.x and self.y==other.y

    def __repr__(self):
        return f"Point(x={self.x}, y={self.y}, label={self.label})"


class InvalidDataPoint(ValueError):
    def __init__(self, dataFile, lineIndex):
        self.dataFile= dataFile
        self.lineIndex= lineIndex
        super().__init__(f"Invalid data point at line File {dataFile}, at line {lineIndex}")


def parsePoint(line):
    tokens= line.split()
    if len(tokens)!=2:
        raise ValueError(f"expected 2 tokens, got {len(tokens)}")
    pointX= float(tokens[0])
    pointY= float(tokens[1])
    # inputs must be finite
    if not (math.isfinite(pointX) and math.isfinite(pointY)):
        raise ValueError("non-finite coordinate")
    return Point(pointX, pointY)


def readPoints(dataFile):
    """
    Load one `x y` point per line from a UTF-8 text file.

    Any line that is not exactly two numeric tokens, blank lines included,
    raises InvalidDataPoint with the zero-based index of that line.
    """
    with open(dataFile, "r", encoding="utf-8") as file:
        # universal newlines turns \r and \r\n into \n; nothing else ends a line
        lines= file.read().split("\n")
    if lines[-1]=="":
        lines.pop()

    pointList= []
    for i, line in enumerate(lines):
        try:
            pointList.append(parsePoint(line))
        except ValueError as e:
            logging.debug(f"rejected line {i} of {dataFile}: {e}")
            raise InvalidDataPoint(dataFile, i) from e

    logging.info(f"loaded {len(pointList)} points from {dataFile}")
    return pointList
