import logging

from point import Point


def computeCentroids(pointList, oldCentroids):
    """
    Average the points of each label into a fresh list of centroids.

    A label that received no points keeps its centroid from oldCentroids.
    """
    k= len(oldCentroids)
    sumX= [0.0]*k
    sumY= [0.0]*k
    counts= [0]*k
    for point in pointList:
        sumX[point.label]+= point.x
        sumY[point.label]+= point.y
        counts[point.label]+= 1

    newCentroids= []
    for i in range(k):
        if counts[i]==0:
            logging.warning(f"cluster {i} is empty, keeping its previous centroid")
            old= oldCentroids[i]
            newCentroids.append(Point(old.x, old.y, i))
        else:
            newCentroids.append(Point(sumX[i]/counts[i], sumY[i]/counts[i], i))

    return newCentroids
