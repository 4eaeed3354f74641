"""Table cells for containers, services and other Docker resources."""