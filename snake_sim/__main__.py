from snake_sim.app import main

main()
