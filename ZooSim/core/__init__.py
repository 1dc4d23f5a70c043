"""
Moteur ZooSim : journée de jeu, maladie, reproduction, événements,
marché et commandes du joueur. Les modules s'importent directement
(`from ZooSim.core.turn import next_day`) pour éviter les cycles avec
`domain`.
"""
