from sandworm.game import main

main()
