import math
import logging


def getDistance(pointA, pointB):
    # hypot does not overflow on squaring large finite differences
    return math.hypot(pointB.x-pointA.x, pointB.y-pointA.y)


def nearestCentroid(point, centroidList):
    # strict < keeps the first centroid scanned on ties
    nearest= None
    smallestDistance= float('inf')
    for centroid in centroidList:
        candidate= getDistance(point, centroid)
        if nearest is None or candidate < smallestDistance:
            smallestDistance= candidate
            nearest= centroid
    return nearest


def assignLabels(pointList, centroidList):
    for point in pointList:
        point.label= nearestCentroid(point, centroidList).label

    if logging.getLogger().isEnabledFor(logging.DEBUG):
        clusters= getClusters(pointList)
        counts= {centroid.label: len(clusters.get(centroid.label, [])) for centroid in centroidList}
        logging.debug(f"assignment counts per label: {counts}")
    return pointList


def getClusters(pointList):
    clusters= {}
    for point in pointList:
        if clusters.get(point.label)==None:
            clusters[point.label]= []
        clusters[point.label].append(point)
    return clusters
