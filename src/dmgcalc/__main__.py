from dmgcalc.main import main

main()
