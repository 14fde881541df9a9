from vaultauth.app import main

main()
